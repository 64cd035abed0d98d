"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from termcli.adapters.archive.zip_archive_adapter import ZipArchiveAdapter
from termcli.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from termcli.config.settings import Settings, settings as default_settings
from termcli.entities.session import Session
from termcli.ports.archive.archive_port import ArchivePort
from termcli.ports.commands.command_handler_port import CommandHandlerPort
from termcli.ports.files.file_system_port import FileSystemPort
from termcli.use_cases.archive.compress import CompressUseCase
from termcli.use_cases.archive.extract import ExtractUseCase
from termcli.use_cases.commands.archive import UnzipCommand, ZipCommand
from termcli.use_cases.commands.directories import MkdirCommand, RmdirCommand
from termcli.use_cases.commands.files import (
    CatCommand,
    CopyTreeCommand,
    CpCommand,
    EchoCommand,
    RmCommand,
    TouchCommand,
    WcCommand,
)
from termcli.use_cases.commands.navigation import CdCommand, LsCommand, PwdCommand
from termcli.use_cases.commands.session import ExitCommand
from termcli.use_cases.files.copy_tree import CopyTreeUseCase
from termcli.use_cases.interpreter.dispatcher import CommandDispatcher
from termcli.use_cases.interpreter.redirect import RedirectionWrapper
from termcli.use_cases.interpreter.run_line import RunLineUseCase
from termcli.use_cases.interpreter.sessions import SessionRegistry


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, config: Optional[Settings] = None):
        self._instances = {}
        self._settings = config or default_settings
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(
                self._logger, chunk_size=self._settings.chunk_size
            )
        return self._instances["file_system"]

    def get_archive(self) -> ArchivePort:
        """
        Get archive adapter instance.

        Returns:
            ArchivePort implementation
        """
        if "archive" not in self._instances:
            self._instances["archive"] = ZipArchiveAdapter(
                self._logger, chunk_size=self._settings.chunk_size
            )
        return self._instances["archive"]

    def get_copy_tree_use_case(self) -> CopyTreeUseCase:
        if "copy_tree_use_case" not in self._instances:
            self._instances["copy_tree_use_case"] = CopyTreeUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["copy_tree_use_case"]

    def get_compress_use_case(self) -> CompressUseCase:
        if "compress_use_case" not in self._instances:
            self._instances["compress_use_case"] = CompressUseCase(
                self.get_archive(), self.get_file_system(), self._logger
            )
        return self._instances["compress_use_case"]

    def get_extract_use_case(self) -> ExtractUseCase:
        if "extract_use_case" not in self._instances:
            self._instances["extract_use_case"] = ExtractUseCase(
                self.get_archive(), self.get_file_system(), self._logger
            )
        return self._instances["extract_use_case"]

    def get_command_handlers(self) -> list[CommandHandlerPort]:
        """
        Build one handler per supported command.

        Returns:
            Handlers sharing the container's adapters
        """
        fs = self.get_file_system()
        return [
            PwdCommand(),
            CdCommand(fs, self._logger),
            LsCommand(fs, self._logger),
            MkdirCommand(fs, self._logger),
            RmdirCommand(fs, self._logger),
            TouchCommand(fs, self._logger),
            RmCommand(fs, self._logger),
            CpCommand(fs, self._logger),
            CopyTreeCommand(fs, self.get_copy_tree_use_case(), self._logger),
            CatCommand(fs, self._logger),
            WcCommand(fs, self._logger),
            EchoCommand(),
            ZipCommand(self.get_compress_use_case(), self._logger),
            UnzipCommand(fs, self.get_extract_use_case(), self._logger),
            ExitCommand(),
        ]

    def get_dispatcher(self) -> CommandDispatcher:
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = CommandDispatcher(
                self.get_command_handlers(), logger=self._logger
            )
        return self._instances["dispatcher"]

    def get_run_line_use_case(self) -> RunLineUseCase:
        """
        Get run line use case with injected dependencies.

        Returns:
            Configured RunLineUseCase
        """
        if "run_line_use_case" not in self._instances:
            dispatcher = self.get_dispatcher()
            redirection = RedirectionWrapper(
                dispatcher, self.get_file_system(), self._logger
            )
            self._instances["run_line_use_case"] = RunLineUseCase(
                dispatcher, redirection, self._logger
            )
        return self._instances["run_line_use_case"]

    def new_session(self, start_directory: Optional[str] = None) -> Session:
        """
        Create an independent session.

        Args:
            start_directory: Initial current directory (defaults to the configured one)
        """
        return Session(
            start_directory or self._settings.start_directory,
            self._settings.home_directory,
        )

    def get_session_registry(self) -> SessionRegistry:
        if "session_registry" not in self._instances:
            self._instances["session_registry"] = SessionRegistry(
                self.new_session, self._logger
            )
        return self._instances["session_registry"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
