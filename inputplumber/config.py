#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
Client configuration.

Values come from built-in defaults, then an optional YAML file, then
environment variables, each layer overriding the previous one::

    # ~/.config/inputplumber/client.yaml
    bus: system
    service: org.shadowblip.InputPlumber
    timeout: 5.0
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from dbus_fast import BusType
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from inputplumber.dbus_utils import parse_bus_type
from inputplumber.errors import ConfigError
from inputplumber.gamepad import DEFAULT_SERVICE
from inputplumber.log import Log

ENV_BUS = "INPUTPLUMBER_BUS"
ENV_SERVICE = "INPUTPLUMBER_SERVICE"
ENV_TIMEOUT = "INPUTPLUMBER_TIMEOUT"

_logger = Log.get("inputplumber.config")


def default_config_path(environ: Mapping[str, str] | None = None) -> str:
    """Location of the per-user config file."""
    if environ is None:
        environ = os.environ
    base = environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, "inputplumber", "client.yaml")


@dataclass(frozen=True)
class ClientConfig:
    """Settings used to reach the InputPlumber daemon."""

    bus: str = "system"
    service: str = DEFAULT_SERVICE
    timeout: float | None = None

    @property
    def bus_type(self) -> BusType:
        return parse_bus_type(self.bus)

    def merged(self, values: Mapping) -> "ClientConfig":
        """Return a copy with the recognised keys of ``values`` applied."""
        changes = {}
        if values.get("bus") is not None:
            bus = str(values["bus"]).strip().lower()
            parse_bus_type(bus)
            changes["bus"] = bus
        if values.get("service") is not None:
            service = str(values["service"]).strip()
            if not service:
                raise ConfigError("Service name must not be empty")
            changes["service"] = service
        if "timeout" in values:
            changes["timeout"] = _parse_timeout(values["timeout"])
        return replace(self, **changes)


def _parse_timeout(value) -> float | None:
    if value is None or (isinstance(value, str) and value.strip().lower() in ("", "none")):
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout: {value!r}") from None
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {timeout}")
    return timeout


def _load_yaml(path: str) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = YAML(typ="safe").load(f)
    except FileNotFoundError:
        return {}
    except (OSError, YAMLError) as err:
        raise ConfigError(f"Unable to read {path}: {err}") from err

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    unknown = set(data) - {"bus", "service", "timeout"}
    if unknown:
        _logger.warning("%s: ignoring unknown keys: %s", path, ", ".join(sorted(unknown)))
    return data


def load_config(path: str | None = None, environ: Mapping[str, str] | None = None) -> ClientConfig:
    """
    Build the effective configuration.

    :param path: YAML file to read, defaults to default_config_path()
    :param environ: environment mapping, defaults to os.environ
    """
    if environ is None:
        environ = os.environ
    if path is None:
        path = default_config_path(environ)

    config = ClientConfig().merged(_load_yaml(path))

    env_values = {}
    if ENV_BUS in environ:
        env_values["bus"] = environ[ENV_BUS]
    if ENV_SERVICE in environ:
        env_values["service"] = environ[ENV_SERVICE]
    if ENV_TIMEOUT in environ:
        env_values["timeout"] = environ[ENV_TIMEOUT]

    config = config.merged(env_values)
    _logger.debug("Effective config: %s", config)
    return config
