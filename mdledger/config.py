"""Configuration file management for mdledger."""

import os
import tomllib
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

import tomli_w

from mdledger.domain.models import LedgerConfig
from mdledger.logging_setup import get_logger

logger = get_logger(__name__)

_LEDGER_KEYS = frozenset(f.name for f in fields(LedgerConfig))


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "mdledger" / "config.toml"


def default_config() -> dict[str, Any]:
    """Build the default configuration document."""
    return {
        "ledger": asdict(LedgerConfig()),
        "report": {"sort_by": "value"},
    }


def create_default_config(config_path: Path | None = None) -> Path:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Path the config was written to.
    """
    if config_path is None:
        config_path = get_config_path()

    save_config(default_config(), config_path)
    return config_path


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_config_or_default(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration, falling back to an empty document if missing.

    Only the default location may be absent; an explicit path must exist.

    Raises:
        FileNotFoundError: If config_path is given and doesn't exist.
    """
    if config_path is not None:
        return load_config(config_path)

    try:
        return load_config()
    except FileNotFoundError:
        logger.debug("No config file at %s, using defaults", get_config_path())
        return {}


def _table(config: dict[str, Any], name: str) -> dict[str, Any]:
    table = config.get(name, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{name}] must be a table, got {type(table).__name__}")
    return table


def build_ledger_config(config: dict[str, Any]) -> LedgerConfig:
    """Build a LedgerConfig from the [ledger] table.

    Args:
        config: Configuration dictionary.

    Returns:
        LedgerConfig with known keys overriding the defaults.

    Raises:
        ValueError: If [ledger] is not a table, a known key has a non-string
            value, or a delimiter is not a single character.
    """
    overrides: dict[str, str] = {}

    for key, value in _table(config, "ledger").items():
        if key == "path":
            continue
        if key not in _LEDGER_KEYS:
            logger.warning("Ignoring unknown ledger config key: %s", key)
            continue
        if not isinstance(value, str):
            raise ValueError(f"ledger.{key} must be a string, got {type(value).__name__}")
        overrides[key] = value

    return LedgerConfig(**overrides)


def validate_config(config: dict[str, Any]) -> None:
    """Check the shape of the tables read outside LedgerConfig.

    Raises:
        ValueError: If [ledger] or [report] is not a table, or ledger.path or
            report.sort_by is not a string.
    """
    path = _table(config, "ledger").get("path")
    if path is not None and not isinstance(path, str):
        raise ValueError(f"ledger.path must be a string, got {type(path).__name__}")

    sort_by = _table(config, "report").get("sort_by")
    if sort_by is not None and not isinstance(sort_by, str):
        raise ValueError(f"report.sort_by must be a string, got {type(sort_by).__name__}")


def load_ledger_config(config_path: Path | None = None) -> LedgerConfig:
    """Load the ledger format from the config file, or defaults if absent."""
    return build_ledger_config(load_config_or_default(config_path))


def get_ledger_path(config: dict[str, Any]) -> Path | None:
    """Get the default ledger path from config.

    Returns:
        Expanded path, or None if not configured.
    """
    path = _table(config, "ledger").get("path")
    if not path:
        return None
    return Path(path).expanduser()


def get_sort_by(config: dict[str, Any]) -> str:
    """Get the report sort order from config, defaulting to "value"."""
    return _table(config, "report").get("sort_by", "value")
