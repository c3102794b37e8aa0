#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
CLI command implementations.

Each command module registers itself via the COMMANDS list.
"""

from inputplumber.client.commands.base import Command
from inputplumber.client.commands.name import NameCommand

# Order determines help output order
COMMANDS: list[type[Command]] = [
    NameCommand,
]

__all__ = ["COMMANDS", "Command"]
