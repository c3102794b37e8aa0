#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
Name command: show the name of a target gamepad.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from inputplumber.client.commands.base import Command
from inputplumber.client.gamepad_service import get_gamepad_service
from inputplumber.errors import RemoteCallError


class NameCommand(Command):
    """Read the Name property of a target gamepad."""

    name = "name"
    help = "Show the name of a target gamepad"
    aliases: ClassVar[list[str]] = ["gamepad"]

    def configure_parser(self, parser: ArgumentParser) -> None:
        target = parser.add_mutually_exclusive_group()
        target.add_argument(
            "-g", "--gamepad", type=int, metavar="INDEX", help="target gamepad index (default 0)"
        )
        target.add_argument("-p", "--path", type=str, metavar="PATH", help="full object path")
        parser.add_argument("-q", "--quiet", action="store_true", help="only print the name")

    def _selected(self, args: Namespace):
        if args.path is not None:
            return args.path
        if args.gamepad is not None:
            return args.gamepad
        return args.gamepad_spec

    def run(self, args: Namespace) -> int:
        service = get_gamepad_service()

        try:
            gamepad = service.get_gamepad(self._selected(args))
            name = gamepad.Name
        except ValueError as e:
            return self.error(str(e))
        except RemoteCallError as e:
            if args.debug:
                raise
            return self.error(str(e))

        if args.quiet:
            self.print(name)
            return 0

        key_width = 8
        proxy = gamepad.proxy
        self.print(self.out.table_row(key_width, self.out.key("name"), self.out.device(name)))
        self.print(self.out.table_row(key_width, self.out.key("path"), self.out.path(proxy.path)))
        self.print(
            self.out.table_row(key_width, self.out.key("service"), self.out.path(proxy.service))
        )
        return 0
