#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#

# pylint: disable=invalid-name

"""
Client proxy for the ``org.shadowblip.Input.Gamepad`` interface.

InputPlumber exports one object implementing this interface for every
virtual target gamepad it drives. The interface carries a single
read-only string property, ``Name``.

The proxies here borrow a connected dbus_fast MessageBus from the caller.
They never connect, close or reconfigure it, and they keep no copy of
remote values: every read is a fresh Properties.Get round trip.
"""

import asyncio

from dbus_fast.aio import MessageBus
from dbus_fast.introspection import Node

from inputplumber.errors import RemoteCallError
from inputplumber.log import Log

INTERFACE = "org.shadowblip.Input.Gamepad"
DEFAULT_SERVICE = "org.shadowblip.InputPlumber"
DEFAULT_PATH = "/org/shadowblip/InputPlumber/devices/target/gamepad0"

INTROSPECTION_XML = f"""\
<!DOCTYPE node PUBLIC "-//freedesktop//DTD D-BUS Object Introspection 1.0//EN"
 "http://www.freedesktop.org/standards/dbus/1.0/introspect.dtd">
<node>
  <interface name="{INTERFACE}">
    <property name="Name" type="s" access="read"/>
  </interface>
</node>
"""

INTROSPECTION = Node.parse(INTROSPECTION_XML)

_logger = Log.get("inputplumber.gamepad")


class GamepadProxy:
    """
    Async proxy for one target gamepad object.

    :param bus: a connected MessageBus, owned by the caller
    :param service: bus name of the InputPlumber daemon
    :param path: object path of the target gamepad
    """

    def __init__(self, bus: MessageBus, service: str = DEFAULT_SERVICE, path: str = DEFAULT_PATH):
        self._bus = bus
        self._service = service
        self._path = path
        proxy = bus.get_proxy_object(service, path, INTROSPECTION)
        self._iface = proxy.get_interface(INTERFACE)

    @property
    def service(self) -> str:
        return self._service

    @property
    def path(self) -> str:
        return self._path

    @property
    def interface(self) -> str:
        return INTERFACE

    async def get_name(self, timeout: float | None = None) -> str:
        """
        Fetch the ``Name`` property from the remote object.

        :param timeout: seconds to wait for the reply, None waits forever
        :raises RemoteCallError: on any failure to obtain a string value
        """
        _logger.debug("Get %s.Name on %s %s", INTERFACE, self._service, self._path)
        try:
            if timeout is None:
                name = await self._iface.get_name()
            else:
                name = await asyncio.wait_for(self._iface.get_name(), timeout)
        except Exception as err:
            _logger.debug("Get %s.Name failed: %s", INTERFACE, err)
            raise RemoteCallError(err, self._service, self._path, INTERFACE, "Name") from err

        if not isinstance(name, str):
            err = TypeError(f"expected a string, got {type(name).__name__}")
            raise RemoteCallError(err, self._service, self._path, INTERFACE, "Name") from err

        return name

    def __repr__(self):
        return f"<GamepadProxy {self._service} {self._path}>"


class Gamepad:
    """
    Blocking wrapper around GamepadProxy.

    Reading ``Name`` runs the remote request to completion on the event
    loop the bus was connected on, unless another loop is given. That
    loop must not be running. Nothing is cached.
    """

    def __init__(
        self,
        bus: MessageBus,
        service: str = DEFAULT_SERVICE,
        path: str = DEFAULT_PATH,
        loop: asyncio.AbstractEventLoop | None = None,
        timeout: float | None = None,
    ):
        if loop is None:
            # dbus_fast binds a MessageBus to the loop it was created on
            loop = getattr(bus, "_loop", None)
        if loop is None:
            raise ValueError("No event loop given and the bus has none")
        self._proxy = GamepadProxy(bus, service, path)
        self._loop = loop
        self._timeout = timeout

    @property
    def proxy(self) -> GamepadProxy:
        return self._proxy

    @property
    def Name(self) -> str:
        return self._loop.run_until_complete(self._proxy.get_name(self._timeout))

    def __repr__(self):
        return f"<Gamepad {self._proxy.service} {self._proxy.path}>"
