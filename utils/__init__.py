"""Utility modules for the translation engine.

This package provides the logging setup, the path helpers and the string helpers shared by
every component.
"""

from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

__all__: list[str] = ["FileUtils", "LoggerUtils", "StringUtils"]
