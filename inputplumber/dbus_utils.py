#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
Helpers shared by the D-Bus proxies and the CLI.
"""

from dbus_fast import BusType

from inputplumber.errors import ConfigError

TARGET_DEVICE_ROOT = "/org/shadowblip/InputPlumber/devices/target"

_BUS_TYPES = {
    "system": BusType.SYSTEM,
    "session": BusType.SESSION,
}


def target_gamepad_path(index: int) -> str:
    """
    Object path of the virtual target gamepad with the given index.

    InputPlumber exports its target gamepads as ``gamepad0``, ``gamepad1``...
    below the target device root.
    """
    if index < 0:
        raise ValueError(f"Gamepad index must be >= 0, got {index}")
    return f"{TARGET_DEVICE_ROOT}/gamepad{index}"


def parse_bus_type(name: str) -> BusType:
    """Map "system" or "session" to a dbus_fast BusType."""
    try:
        return _BUS_TYPES[name.strip().lower()]
    except (AttributeError, KeyError):
        raise ConfigError(f"Unknown bus type: {name!r} (expected 'system' or 'session')") from None

