#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""Tests for D-Bus helpers."""

import pytest
from dbus_fast import BusType

from inputplumber.dbus_utils import parse_bus_type, target_gamepad_path
from inputplumber.errors import ConfigError
from inputplumber.gamepad import DEFAULT_PATH


def test_target_gamepad_zero_is_default_path():
    assert target_gamepad_path(0) == DEFAULT_PATH


def test_target_gamepad_index():
    assert target_gamepad_path(12) == "/org/shadowblip/InputPlumber/devices/target/gamepad12"


def test_target_gamepad_negative_index():
    with pytest.raises(ValueError):
        target_gamepad_path(-1)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("system", BusType.SYSTEM), ("session", BusType.SESSION), (" Session ", BusType.SESSION)],
)
def test_parse_bus_type(name, expected):
    assert parse_bus_type(name) == expected


@pytest.mark.parametrize("name", ["starter", "", None])
def test_parse_bus_type_rejects_unknown(name):
    with pytest.raises(ConfigError):
        parse_bus_type(name)

