#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
Gamepad service layer for CLI commands.

Owns the bus connection and hands it to Gamepad proxies, which only
borrow it. Resolves the gamepad specifiers accepted on the command line.
"""

import asyncio
import re

from dbus_fast.aio import MessageBus

from inputplumber.config import ClientConfig, load_config
from inputplumber.dbus_utils import target_gamepad_path
from inputplumber.errors import RemoteCallError
from inputplumber.gamepad import DEFAULT_PATH, Gamepad
from inputplumber.log import Log

_logger = Log.get("inputplumber.client")

_GAMEPAD_NAME = re.compile(r"gamepad(\d+)$")


def resolve_gamepad_path(spec: str | int | None) -> str:
    """
    Turn a gamepad specifier into an object path.

    Accepts None (the default gamepad), an index, "gamepadN" or an
    absolute object path.
    """
    if spec is None:
        return DEFAULT_PATH
    if isinstance(spec, int):
        return target_gamepad_path(spec)

    spec = spec.strip()
    if spec.startswith("/"):
        return spec
    if spec.isdigit():
        return target_gamepad_path(int(spec))

    match = _GAMEPAD_NAME.match(spec)
    if match:
        return target_gamepad_path(int(match.group(1)))

    raise ValueError(f"Invalid gamepad: {spec!r}")


class GamepadService:
    """
    Service layer for gamepad operations.

    Connects lazily on first use and keeps one connection for the
    lifetime of the service. Call close() to release it.
    """

    def __init__(self, config: ClientConfig | None = None):
        self._config = config
        self._loop: asyncio.AbstractEventLoop | None = None
        self._bus: MessageBus | None = None

    @property
    def config(self) -> ClientConfig:
        if self._config is None:
            self._config = load_config()
        return self._config

    @property
    def is_connected(self) -> bool:
        return self._bus is not None and self._bus.connected

    def _get_loop(self):
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop

    def _run(self, coro):
        """Run coroutine synchronously."""
        return self._get_loop().run_until_complete(coro)

    async def _open(self) -> MessageBus:
        # MessageBus picks up the running loop in its constructor
        return await MessageBus(bus_type=self.config.bus_type).connect()

    def _connect(self) -> MessageBus:
        if self._bus is None:
            bus = self.config.bus
            _logger.debug("Connecting to the %s bus", bus)
            try:
                self._bus = self._run(self._open())
            except Exception as err:
                raise RemoteCallError(
                    err,
                    "org.freedesktop.DBus",
                    "/org/freedesktop/DBus",
                    "org.freedesktop.DBus",
                    "Hello",
                    bus=bus,
                ) from err
        return self._bus

    def get_gamepad(self, spec: str | int | None = None) -> Gamepad:
        """
        Get a blocking proxy for the selected target gamepad.

        Raises:
            ValueError: If spec is not a valid gamepad specifier
            RemoteCallError: If the bus cannot be reached
        """
        path = resolve_gamepad_path(spec)
        bus = self._connect()
        return Gamepad(
            bus,
            service=self.config.service,
            path=path,
            loop=self._get_loop(),
            timeout=self.config.timeout,
        )

    def get_name(self, spec: str | int | None = None) -> str:
        """Name of the selected target gamepad."""
        return self.get_gamepad(spec).Name

    def close(self):
        """Disconnect from the bus and release the event loop."""
        if self._bus is not None:
            self._bus.disconnect()
            self._run(self._bus.wait_for_disconnect())
            self._bus = None
        if self._loop is not None and not self._loop.is_closed():
            self._loop.close()
        self._loop = None


# Singleton for CLI use
_service: GamepadService | None = None


def init_gamepad_service(config: ClientConfig) -> GamepadService:
    """Replace the singleton with a service using the given config."""
    global _service
    if _service is not None:
        _service.close()
    _service = GamepadService(config)
    return _service


def get_gamepad_service() -> GamepadService:
    """Get the singleton gamepad service instance."""
    global _service
    if _service is None:
        _service = GamepadService()
    return _service
