#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""Tests for CLI main entry point."""

import pytest
from dbus_fast import ErrorType
from dbus_fast.errors import DBusError

from inputplumber.client.gamepad_service import GamepadService, resolve_gamepad_path
from inputplumber.client.main import main
from inputplumber.errors import RemoteCallError
from inputplumber.gamepad import INTERFACE


class MockProxy:
    def __init__(self, service, path):
        self.service = service
        self.path = path


class MockGamepad:
    """Mock blocking gamepad proxy."""

    def __init__(self, name, service, path):
        self._name = name
        self.proxy = MockProxy(service, path)

    @property
    def Name(self):
        if isinstance(self._name, Exception):
            raise self._name
        return self._name


class MockGamepadService(GamepadService):
    """Mock gamepad service that doesn't connect to D-Bus."""

    def __init__(self):
        super().__init__()
        self.names = {0: "Test Gamepad", 1: "Second Pad"}
        self.requested = []

    def get_gamepad(self, spec=None):
        self.requested.append(spec)
        path = resolve_gamepad_path(spec)
        index = int(path.rsplit("gamepad", 1)[1])
        name = self.names.get(index)
        if name is None:
            cause = DBusError(ErrorType.UNKNOWN_OBJECT, "No such object")
            name = RemoteCallError(cause, self.config.service, path, INTERFACE, "Name")
        return MockGamepad(name, self.config.service, path)


@pytest.fixture(autouse=True)
def mock_gamepad_service(monkeypatch):
    """Replace the gamepad service used by commands with a mock."""
    mock = MockGamepadService()
    monkeypatch.setattr("inputplumber.client.commands.name.get_gamepad_service", lambda: mock)
    return mock


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: inputplumber" in capsys.readouterr().out


def test_name_default_gamepad(capsys):
    assert main(["--no-color", "name"]) == 0
    out = capsys.readouterr().out
    assert "Test Gamepad" in out
    assert "/org/shadowblip/InputPlumber/devices/target/gamepad0" in out
    assert "org.shadowblip.InputPlumber" in out


def test_name_quiet(capsys):
    assert main(["name", "-q"]) == 0
    assert capsys.readouterr().out == "Test Gamepad\n"


def test_name_by_index(capsys, mock_gamepad_service):
    assert main(["name", "-q", "-g", "1"]) == 0
    assert capsys.readouterr().out == "Second Pad\n"
    assert mock_gamepad_service.requested == [1]


def test_name_by_at_spec(capsys, mock_gamepad_service):
    assert main(["@gamepad1", "name", "-q"]) == 0
    assert capsys.readouterr().out == "Second Pad\n"
    assert mock_gamepad_service.requested == ["gamepad1"]


def test_name_by_path(capsys):
    path = "/org/shadowblip/InputPlumber/devices/target/gamepad1"
    assert main(["gamepad", "-q", "--path", path]) == 0
    assert capsys.readouterr().out == "Second Pad\n"


def test_missing_gamepad_fails(capsys):
    assert main(["--no-color", "name", "-g", "7"]) == 1
    out = capsys.readouterr().out
    assert "UnknownObject" in out
    assert "gamepad7" in out


def test_missing_gamepad_raises_in_debug():
    with pytest.raises(RemoteCallError):
        main(["--debug", "name", "-g", "7"])


def test_invalid_spec_fails(capsys):
    assert main(["--no-color", "@joystick", "name"]) == 1
    assert "Invalid gamepad" in capsys.readouterr().out


def test_invalid_config_fails(capsys, monkeypatch):
    monkeypatch.setenv("INPUTPLUMBER_BUS", "starter")
    assert main(["--no-color", "name"]) == 1
    assert "Unknown bus type" in capsys.readouterr().err
