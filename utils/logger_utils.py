from __future__ import annotations

import logging
import sys
from logging import Formatter, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, NamedTuple, Self, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LogLevel", "LoggerUtils"]

LevelType: TypeAlias = Literal[
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

_LOG_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2MB
_LOG_BACKUP_COUNT: Final[int] = 2

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
DEFAULT_NAMESPACE: Final[str] = "PivotChat"


class LogLevel(NamedTuple):
    """Logging level as a name/value pair.

    Attributes:
        name (str): Level name such as 'INFO'.
        value (int): Numeric level.
    """

    name: str
    value: int


class LoggerUtils:
    """Process-wide logging setup for the translation engine.

    The first instantiation attaches a console handler (WARNING and above) and, when a
    file name is given, a rotating UTF-8 file handler to the namespace root logger.
    Later instantiations are no-ops so library code can call it freely.

    Attributes:
        _LOGGER_NAMESPACE (str): Namespace prefixed to every logger name.
        _configured (bool): Whether handlers have been attached.
        _instance (LoggerUtils | None): The singleton instance.
    """

    _LOGGER_NAMESPACE: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False
    _instance: ClassVar[Self | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, filename: str | Path = "", *, use_null_console: bool = False) -> None:
        """Attach handlers to the namespace root logger.

        Args:
            filename (str | Path): Absolute path of the log file. Empty disables file logging.
            use_null_console (bool): Use a NullHandler instead of writing to stderr.
        """
        if LoggerUtils._configured:
            return

        self.root_logger: logging.Logger = logging.getLogger(self._LOGGER_NAMESPACE)
        self._use_null_console: bool = bool(use_null_console) or sys.stderr is None
        filename = str(filename)
        # the logger level must be lower than the handler levels or nothing reaches them
        self.root_logger.setLevel(DEFAULT_LOG_LEVEL)

        self._console_logging()
        if filename.strip():
            self._file_logging(filename)
        else:
            self.root_logger.debug("Log file name is empty. Logging to the file is not performed.")

        LoggerUtils._configured = True

    @classmethod
    def initialize(cls, namespace: str) -> None:
        """Change the logger namespace before any handler is configured.

        Args:
            namespace (str): New namespace.

        Raises:
            RuntimeError: If logging is already configured.
        """
        if cls._configured:
            msg = "LoggerUtils is already configured. Reinitialization is not allowed."
            raise RuntimeError(msg)

        cls._LOGGER_NAMESPACE = namespace

    def _console_logging(self) -> None:
        if self._use_null_console:
            if not self._has_handler(NullHandler):
                self.root_logger.addHandler(NullHandler())
            return

        if self._has_handler(StreamHandler):
            self.root_logger.warning("Console logging is already configured.")
            return

        console_handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(Formatter("%(message)s"))
        self.root_logger.addHandler(console_handler)

    def _file_logging(self, filename: str) -> None:
        """Configure rotating UTF-8 file output.

        Args:
            filename (str): Absolute path to the log file.
        """
        if self._has_handler(RotatingFileHandler):
            self.root_logger.warning("File logging is already configured.")
            return

        try:
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=_LOG_FILE_SIZE,
                backupCount=_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except (FileNotFoundError, PermissionError):
            self.root_logger.error("Incorrect log file name: %s\nLogging to the file is not performed.", filename)
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            Formatter("%(asctime)s %(levelname)-8s %(lineno)4d %(name)-40s\t%(funcName)s\t%(message)s")
        )
        self.root_logger.addHandler(file_handler)

    def _has_handler(self, handler_type: type) -> bool:
        return any(isinstance(h, handler_type) for h in self.root_logger.handlers)

    def set_level(self, level: LevelType) -> None:
        """Set the namespace root logging level, falling back to INFO for unknown names.

        Args:
            level (LevelType): Level name.
        """
        level_map: dict[str, int] = logging.getLevelNamesMapping()
        try:
            self.root_logger.setLevel(level_map[level.upper()])
        except KeyError:
            self.root_logger.setLevel(DEFAULT_LOG_LEVEL)
            self.root_logger.warning("Unknown logging level '%s' specified.\nLogging level set to 'INFO'.", level)

    def get_level(self) -> LogLevel:
        level_value: int = self.root_logger.getEffectiveLevel()
        return LogLevel(name=logging.getLevelName(level_value), value=level_value)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Get a logger inside the engine namespace.

        Args:
            name (str | None): Module name. None returns the namespace root logger.

        Returns:
            logging.Logger: The logger instance.
        """
        full_name: str | None
        if LoggerUtils._LOGGER_NAMESPACE:
            full_name = f"{LoggerUtils._LOGGER_NAMESPACE}.{name}" if name else LoggerUtils._LOGGER_NAMESPACE
        else:
            full_name = name or None
        return logging.getLogger(full_name)
