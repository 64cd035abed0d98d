"""
HTTP application exposing interpreter sessions.
"""

import logging

from fastapi import FastAPI

from termcli.api.routers import router as api_router
from termcli.config.settings import settings

# Create FastAPI app
app = FastAPI(title="termcli API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
