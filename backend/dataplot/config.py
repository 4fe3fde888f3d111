"""Runtime configuration for the dataplot service.

Settings come from three places, lowest precedence first: built-in defaults,
the server config file (JSON or YAML), and environment variables (optionally
loaded from a ``.env`` file).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from dotenv import load_dotenv

from dataplot.analyzers.regression import ResidualMode
from dataplot.errors import ConfigError

EXIT_SUCCESS = 0
EXIT_NO_CONFIG = 1
EXIT_CONFIG_PARSE = 2
EXIT_CANT_LISTEN = 3

DEFAULT_CONFIG_FILE = "server.conf"
DEFAULT_ADDRESS = "0.0.0.0:6060"
NO_LOG = "nolog"
DEFAULT_LOG_FORMAT = ["remote_addr", "method", "path", "status", "duration_ms"]

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CLIENT_DIR = _REPO_ROOT / "client"


@dataclass(frozen=True)
class Settings:
    address: str = DEFAULT_ADDRESS
    custom_log: str = NO_LOG
    log_format: List[str] = field(default_factory=lambda: list(DEFAULT_LOG_FORMAT))
    client_dir: Path = DEFAULT_CLIENT_DIR
    residual_mode: ResidualMode = ResidualMode.INHERITED
    log_level: str = "INFO"

    @property
    def access_log_enabled(self) -> bool:
        return bool(self.custom_log) and self.custom_log != NO_LOG


def parse_address(address: str) -> Tuple[str, int]:
    """Split ``host:port`` into its parts."""
    host, sep, port_text = address.rpartition(":")
    if not sep:
        raise ConfigError(f"Address must be host:port, got {address!r}", exit_code=EXIT_CONFIG_PARSE)
    try:
        port = int(port_text)
    except ValueError as exc:
        raise ConfigError(f"Invalid port in address {address!r}", exit_code=EXIT_CONFIG_PARSE) from exc
    if not 0 <= port <= 65535:
        raise ConfigError(f"Port out of range in address {address!r}", exit_code=EXIT_CONFIG_PARSE)
    return host or "0.0.0.0", port


def _parse_residual_mode(raw_value: Any) -> ResidualMode:
    try:
        return ResidualMode(str(raw_value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in ResidualMode)
        raise ConfigError(
            f"ResidualMode must be one of {choices}, got {raw_value!r}",
            exit_code=EXIT_CONFIG_PARSE,
        ) from exc


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw_text = handle.read()
    except OSError as exc:
        raise ConfigError(f"failed to read {path}: {exc}", exit_code=EXIT_NO_CONFIG) from exc

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config error at {str(exc)!r} (while reading {path})", exit_code=EXIT_CONFIG_PARSE) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config error: {path} must contain a mapping", exit_code=EXIT_CONFIG_PARSE)
    return data


def _apply_file_values(settings: Settings, data: Dict[str, Any]) -> Settings:
    updates: Dict[str, Any] = {}

    if data.get("Address") is not None:
        updates["address"] = str(data["Address"])
    if data.get("CustomLog") is not None:
        updates["custom_log"] = str(data["CustomLog"])
    if data.get("LogFormat") is not None:
        log_format = data["LogFormat"]
        if not isinstance(log_format, list):
            raise ConfigError("Config error: LogFormat must be a list of field names", exit_code=EXIT_CONFIG_PARSE)
        updates["log_format"] = [str(item) for item in log_format]
    if data.get("ClientDir") is not None:
        updates["client_dir"] = Path(str(data["ClientDir"]))
    if data.get("ResidualMode") is not None:
        updates["residual_mode"] = _parse_residual_mode(data["ResidualMode"])

    return replace(settings, **updates)


def _apply_env_values(settings: Settings) -> Settings:
    updates: Dict[str, Any] = {"log_level": os.getenv("LOG_LEVEL", settings.log_level).upper()}

    address = os.getenv("DATAPLOT_ADDRESS")
    if address:
        updates["address"] = address
    client_dir = os.getenv("DATAPLOT_CLIENT_DIR")
    if client_dir:
        updates["client_dir"] = Path(client_dir)
    residual_mode = os.getenv("DATAPLOT_RESIDUAL_MODE")
    if residual_mode:
        updates["residual_mode"] = _parse_residual_mode(residual_mode)

    return replace(settings, **updates)


def settings_from_env() -> Settings:
    """Defaults overridden by the environment only; no config file is read."""
    load_dotenv()
    return _apply_env_values(Settings())


def load_settings(
    config_path: Optional[Path | str] = None,
    *,
    address_override: Optional[str] = None,
) -> Settings:
    """Load the config file, then apply environment and command line overrides.

    Raises:
        ConfigError: if the file cannot be read (``EXIT_NO_CONFIG``) or holds
            invalid values (``EXIT_CONFIG_PARSE``).
    """
    load_dotenv()
    path = Path(config_path or os.getenv("DATAPLOT_CONFIG", DEFAULT_CONFIG_FILE))

    settings = _apply_file_values(Settings(), _read_config_file(path))
    settings = _apply_env_values(settings)
    if address_override:
        settings = replace(settings, address=address_override)

    parse_address(settings.address)
    return settings
