#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
from .config import ClientConfig, load_config
from .errors import ConfigError, InputPlumberError, RemoteCallError
from .gamepad import DEFAULT_PATH, DEFAULT_SERVICE, INTERFACE, Gamepad, GamepadProxy
from .version import __version__
