"""Configuration file loader and validator.

Handles reading, formatting, and validating settings from the INI configuration file.
Raises exceptions for any issues encountered during loading.
"""

from __future__ import annotations

import ast
import configparser
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from models.config_models import Config
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "ALLOWED_PHRASE_STORES",
    "Config",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ALLOWED_PHRASE_STORES: list[str] = ["json", "rest", "memory"]


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Handles loading and validation of configuration settings.

    Reads the INI file into a ``Config``, coercing each value to the type of the matching
    dataclass field, applies command-line overrides and validates the result.

    Args:
        config_filename (str): INI file name to load.
        script_name (str): Executing script name, used in error messaging.
        debug (bool | None): Optional override enabling debug mode.
        log_level (str | None): Optional override for the log level.
        phrase_store (str | None): Optional override for the phrase store file path.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(
        self,
        *,
        config_filename: str,
        script_name: str,
        **args,
    ) -> None:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()
        # keep option names upper case, matching the dataclass fields
        parser.optionxform = str  # type: ignore[assignment, method-assign]

        try:
            parser.read(config_filename, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        self._convert_settings(parser)
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
            self.config.GENERAL.LOG_LEVEL = "DEBUG"
        if args.get("log_level"):
            self.config.GENERAL.LOG_LEVEL = str(args["log_level"]).upper()
        if args.get("phrase_store"):
            self.config.PHRASE_STORE.TYPE = "json"
            self.config.PHRASE_STORE.PATH = str(args["phrase_store"])
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Copy every known INI option into the Config object.

        Args:
            parser (ConfigParser): Parsed INI data.

        Raises:
            ConfigFormatError: If a value cannot be parsed or coerced to the expected type.
        """
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            for key in fields(getattr(self.config, section.name)):
                if not parser.has_option(section.name, key.name):
                    logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                    continue
                formatted_value = formatter.apply_format(section, key)
                setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate the phrase store selection and the engine bounds.

        Raises:
            ConfigValueError: If a setting is outside its allowed range.
            ConfigTypeError: If a setting has the wrong type.
        """
        self._inspect_defined_item("PHRASE_STORE", "TYPE", ALLOWED_PHRASE_STORES)
        self._validate_positive("ENGINE", "CACHE_MAX_ENTRIES")
        self._validate_positive("ENGINE", "CACHE_TTL_SEC")
        self._validate_positive("ENGINE", "PHRASE_LIMIT")
        self._validate_positive("PHRASE_STORE", "TIMEOUT")

        if self.config.PHRASE_STORE.TYPE == "rest" and not self.config.PHRASE_STORE.URL.strip():
            msg = "'PHRASE_STORE.URL' is required when 'PHRASE_STORE.TYPE' is 'rest'"
            raise ConfigValueError(msg)

        aliases: Any = self.config.LANGUAGES.ALIASES
        if not isinstance(aliases, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in aliases.items()
        ):
            msg = f"Unsupported type used for 'LANGUAGES.ALIASES': {type(aliases)}"
            raise ConfigTypeError(msg)

    def _inspect_defined_item(self, section_name: str, key_name: str, defined_list: list[str]) -> None:
        value: Any = getattr(getattr(self.config, section_name), key_name)
        field_name: str = f"{section_name}.{key_name}"

        if not isinstance(value, str):
            msg: str = f"Unsupported type used for '{field_name}': {type(value)}"
            raise ConfigTypeError(msg)
        if value.lower() not in defined_list:
            msg = f"Unknown value '{value}' is set for '{field_name}' (allowed: {', '.join(defined_list)})"
            raise ConfigValueError(msg)
        setattr(getattr(self.config, section_name), key_name, value.lower())

    def _validate_positive(self, section_name: str, key_name: str) -> None:
        value: int | float = getattr(getattr(self.config, section_name), key_name)
        if value <= 0:
            msg: str = f"'{section_name}.{key_name}' must be greater than zero: {value}"
            raise ConfigValueError(msg)


class _ConfigFormatter:
    """Converts INI string values to typed Python objects (bool, int, float, str, dict)."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert an INI value to the type of the current Config field value.

        Args:
            section (DataclassField[Any]): Configuration section field containing the key.
            key (DataclassField[Any]): Target field within the section.

        Returns:
            Any: Parsed value.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigFormatError: If literal evaluation fails due to invalid syntax.
            ConfigTypeError: If an unexpected type is encountered during coercion.
        """
        current: Any = getattr(getattr(self.config, section.name), key.name)
        formatters: dict[type, Callable[[DataclassField[Any], DataclassField[Any]], Any]] = {
            bool: self.parse_as_boolean,
            int: self.parse_as_integer,
            float: self.parse_as_float,
            str: self.parse_as_string,
        }

        formatter: Callable[[DataclassField[Any], DataclassField[Any]], Any] | None = formatters.get(type(current))
        if formatter:
            try:
                return formatter(section, key)
            except ValueError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigValueError(msg) from err
            except TypeError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigTypeError(msg) from err

        value_str: str = self.parser[section.name][key.name]
        try:
            return ast.literal_eval(value_str)
        except ValueError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigValueError(msg) from err
        except SyntaxError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigFormatError(msg) from err

    def _unquoted(self, section: DataclassField[Any], key: DataclassField[Any]) -> str:
        value: str = self.parser.get(section.name, key.name).strip()
        for char in ("'", '"'):
            value = value.removeprefix(char).removesuffix(char)
        return value

    def parse_as_float(self, section: DataclassField[Any], key: DataclassField[Any]) -> float:
        return float(self._unquoted(section, key))

    def parse_as_integer(self, section: DataclassField[Any], key: DataclassField[Any]) -> int:
        return int(float(self._unquoted(section, key)))

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        return self.parser.getboolean(section.name, key.name)

    def parse_as_string(self, section: DataclassField[Any], key: DataclassField[Any]) -> str:
        return self._unquoted(section, key)
