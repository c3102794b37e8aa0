# inputplumber test configuration and shared fixtures
from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest
from dbus_fast import ErrorType
from dbus_fast.errors import DBusError, InterfaceNotFoundError

from inputplumber.gamepad import INTERFACE

if TYPE_CHECKING:
    from collections.abc import Generator


# ─────────────────────────────────────────────────────────────────────────────
# Async fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def event_loop() -> Generator[asyncio.AbstractEventLoop, None, None]:
    """Create an event loop for blocking proxy tests."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


# ─────────────────────────────────────────────────────────────────────────────
# Fake bus
# ─────────────────────────────────────────────────────────────────────────────


class FakeGamepadInterface:
    """Stands in for the dbus_fast proxy interface of one object."""

    def __init__(self, bus: FakeBus, service: str, path: str):
        self._bus = bus
        self._service = service
        self._path = path

    async def get_name(self):
        self._bus.requests.append((self._service, self._path, INTERFACE, "Name"))
        key = (self._service, self._path)
        if key not in self._bus.names:
            raise DBusError(ErrorType.UNKNOWN_OBJECT, f"No such object path '{self._path}'")
        value = self._bus.names[key]
        if isinstance(value, BaseException):
            raise value
        if callable(value):
            return await value()
        return value


class FakeProxyObject:
    def __init__(self, bus: FakeBus, service: str, path: str, introspection):
        self.bus_name = service
        self.path = path
        self.introspection = introspection
        self._iface = FakeGamepadInterface(bus, service, path)

    def get_interface(self, name):
        if name != INTERFACE:
            raise InterfaceNotFoundError(f"interface not found on this object: {name}")
        return self._iface


class FakeBus:
    """
    Minimal MessageBus double.

    ``names`` maps (service, path) to the remote Name value, an exception
    to raise, or an async callable producing the value.
    """

    def __init__(self):
        self.names = {}
        self.requests = []
        self.connected = True
        self.disconnect_calls = 0
        self._loop = None

    def get_proxy_object(self, service, path, introspection):
        return FakeProxyObject(self, service, path, introspection)

    def disconnect(self):
        self.disconnect_calls += 1
        self.connected = False

    async def wait_for_disconnect(self):
        return None


@pytest.fixture
def fake_bus() -> FakeBus:
    return FakeBus()


# ─────────────────────────────────────────────────────────────────────────────
# Environment
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the user's config file and environment out of the tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in ("INPUTPLUMBER_BUS", "INPUTPLUMBER_SERVICE", "INPUTPLUMBER_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "config"


# ─────────────────────────────────────────────────────────────────────────────
# Pytest configuration
# ─────────────────────────────────────────────────────────────────────────────


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks tests requiring a session bus")
