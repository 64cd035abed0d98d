"""
Configuration settings for the application.
"""

import getpass
import os

from dotenv import load_dotenv

from termcli.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str = os.path.realpath(
            os.path.expanduser(self._get_env("TERMCLI_START_DIR", os.getcwd()))
        )
        self.home_directory: str = os.path.realpath(
            os.path.expanduser(self._get_env("TERMCLI_HOME", "~"))
        )
        self.chunk_size: int = self._get_positive_int_env("TERMCLI_CHUNK_SIZE", 512)
        self.log_level: str = self._get_env("TERMCLI_LOG_LEVEL", "WARNING").upper()
        self.user_name: str = self._get_env("TERMCLI_USER", self._default_user())

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key) or default

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a strictly positive integer environment variable, raise error if invalid."""
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value

    @staticmethod
    def _default_user() -> str:
        try:
            return getpass.getuser()
        except Exception:
            return "user"


# Global settings instance
settings = Settings()
