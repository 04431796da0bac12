from __future__ import annotations

from textwrap import dedent
from typing import TYPE_CHECKING

import pytest

from config.loader import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigTypeError,
    ConfigValueError,
)
from models.config_models import Config

if TYPE_CHECKING:
    from pathlib import Path


def _write_ini(tmp_path: Path, content: str) -> Path:
    ini_path: Path = tmp_path / "pivotchat.ini"
    ini_path.write_text(dedent(content), encoding="utf-8")
    return ini_path


def test_default_config_is_usable_without_file() -> None:
    config = Config()

    assert config.PHRASE_STORE.TYPE == "json"
    assert config.ENGINE.CACHE_MAX_ENTRIES == 5000
    assert config.ENGINE.CACHE_TTL_SEC == 60.0
    assert config.ENGINE.PHRASE_LIMIT == 2000


def test_config_loader_raises_for_missing_file(tmp_path: Path) -> None:
    ini_path: Path = tmp_path / "missing.ini"
    with pytest.raises(ConfigFileNotFoundError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_config_loader_coerces_types(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        DEBUG = yes
        LOG_LEVEL = "warning"

        [ENGINE]
        CACHE_MAX_ENTRIES = 100
        CACHE_TTL_SEC = 2.5
        PHRASE_LIMIT = "50"

        [PHRASE_STORE]
        TYPE = "Memory"

        [LANGUAGES]
        ALIASES = {"desi": "hindi"}
        """,
    )

    config: Config = ConfigLoader(config_filename=str(ini_path), script_name="test").config

    assert config.GENERAL.DEBUG is True
    assert config.GENERAL.LOG_LEVEL == "warning"
    assert config.ENGINE.CACHE_MAX_ENTRIES == 100
    assert config.ENGINE.CACHE_TTL_SEC == 2.5
    assert config.ENGINE.PHRASE_LIMIT == 50
    assert config.PHRASE_STORE.TYPE == "memory"
    assert config.LANGUAGES.ALIASES == {"desi": "hindi"}


def test_config_loader_applies_overrides(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [PHRASE_STORE]
        TYPE = "memory"
        """,
    )

    config: Config = ConfigLoader(
        config_filename=str(ini_path),
        script_name="test",
        debug=True,
        phrase_store="phrases.json",
    ).config

    assert config.GENERAL.DEBUG is True
    assert config.GENERAL.LOG_LEVEL == "DEBUG"
    assert config.PHRASE_STORE.TYPE == "json"
    assert config.PHRASE_STORE.PATH == "phrases.json"


def test_unknown_phrase_store_is_rejected(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [PHRASE_STORE]
        TYPE = "sqlite"
        """,
    )

    with pytest.raises(ConfigValueError, match="sqlite"):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_rest_store_requires_url(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [PHRASE_STORE]
        TYPE = "rest"
        """,
    )

    with pytest.raises(ConfigValueError, match="URL"):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("CACHE_MAX_ENTRIES", "0"),
        ("CACHE_TTL_SEC", "-1"),
        ("PHRASE_LIMIT", "0"),
    ],
)
def test_non_positive_engine_bounds_are_rejected(tmp_path: Path, key: str, value: str) -> None:
    ini_path: Path = _write_ini(tmp_path, f"[ENGINE]\n{key} = {value}\n")

    with pytest.raises(ConfigValueError, match=key):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_invalid_number_raises_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [ENGINE]
        CACHE_MAX_ENTRIES = many
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_invalid_literal_raises_format_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [LANGUAGES]
        ALIASES = {"desi": "hindi"
        """,
    )

    with pytest.raises(ConfigFormatError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_aliases_must_be_a_string_mapping(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [LANGUAGES]
        ALIASES = ["hindi"]
        """,
    )

    with pytest.raises(ConfigTypeError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_unknown_sections_and_keys_are_ignored(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [UNKNOWN]
        VALUE = 1

        [ENGINE]
        NOT_A_SETTING = 3
        """,
    )

    config: Config = ConfigLoader(config_filename=str(ini_path), script_name="test").config

    assert config == Config()
