#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
Exception types raised by the InputPlumber client.
"""

from dbus_fast.errors import DBusError


class InputPlumberError(Exception):
    """Base class for all client errors."""


class ConfigError(InputPlumberError):
    """Invalid configuration value or file."""


class RemoteCallError(InputPlumberError):
    """
    A request to the remote object failed.

    Raised for every failure cause alike: an unavailable bus, an unknown
    service, object, interface or property, a reply that does not decode
    to the expected type, or a timeout. The original exception is kept
    in ``cause`` and chained as ``__cause__``. ``bus`` names the bus type
    when the failure happened while connecting to it.
    """

    def __init__(
        self,
        cause: BaseException,
        service: str,
        path: str,
        interface: str,
        member: str,
        bus: str | None = None,
    ):
        self.cause = cause
        self.bus = bus
        self.service = service
        self.path = path
        self.interface = interface
        self.member = member
        self.error_name = cause.type if isinstance(cause, DBusError) else None
        super().__init__(self._describe())

    def _describe(self) -> str:
        reason = str(self.cause) or type(self.cause).__name__
        if self.error_name:
            reason = f"{self.error_name}: {reason}"
        target = f"{self.service} {self.path} {self.interface}.{self.member}"
        if self.bus:
            target = f"{self.bus} bus: {target}"
        return f"{target}: {reason}"
