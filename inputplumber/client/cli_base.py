#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
CLI base infrastructure.

Provides the foundation for the inputplumber CLI with:
- Gamepad selection (@gamepad syntax)
- Bus and daemon selection
- Output styling integration
- Subcommand registration
"""

import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter

from inputplumber.client.output import Output
from inputplumber.version import __version__


class InputPlumberCLI:
    """
    Base CLI handler with gamepad selection and semantic output.

    Usage:
        cli = InputPlumberCLI()
        subparsers = cli.add_subparsers()
        # Register commands...
        args = cli.parse_args()
    """

    def __init__(self):
        self.out = Output()
        self.parser = self._create_parser()
        self._subparsers = None

    def _create_parser(self) -> ArgumentParser:
        """Create the root argument parser."""
        parser = ArgumentParser(
            prog="inputplumber",
            description="Query virtual gamepads managed by InputPlumber",
            formatter_class=RawDescriptionHelpFormatter,
            epilog=self._epilog(),
        )

        parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=f"inputplumber {__version__}",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="enable debug output",
        )
        parser.add_argument(
            "--no-color",
            action="store_true",
            help="disable colored output",
        )
        parser.add_argument(
            "-c",
            "--config",
            type=str,
            metavar="FILE",
            help="read settings from FILE instead of the default location",
        )

        bus = parser.add_mutually_exclusive_group()
        bus.add_argument(
            "--system",
            dest="bus",
            action="store_const",
            const="system",
            help="talk to the daemon on the system bus (default)",
        )
        bus.add_argument(
            "--session",
            dest="bus",
            action="store_const",
            const="session",
            help="talk to the daemon on the session bus",
        )

        parser.add_argument(
            "--service",
            type=str,
            metavar="NAME",
            help="bus name of the InputPlumber daemon",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            metavar="SECONDS",
            help="give up on a request after SECONDS",
        )

        return parser

    def _epilog(self) -> str:
        """Generate help epilog with examples."""
        return """\
Gamepad Selection:
  @0             Select target gamepad by index
  @gamepad1      Select target gamepad by object name
  @/org/...      Select by full object path

Examples:
  inputplumber name            Show the name of gamepad0
  inputplumber @1 name         Show the name of gamepad1
  inputplumber --session name  Query a daemon on the session bus
"""

    def _extract_gamepad_spec(self, args: list[str]) -> tuple[str | None, list[str]]:
        """
        Extract @gamepad specifier from argument list.

        Only extracts the first @-prefixed argument.

        Returns:
            (gamepad_spec, remaining_args)
        """
        gamepad_spec = None
        remaining = []

        for arg in args:
            if arg.startswith("@") and gamepad_spec is None:
                gamepad_spec = arg[1:]
            else:
                remaining.append(arg)

        return gamepad_spec, remaining

    def add_subparsers(self):
        """
        Add subparser container for commands.

        Call this before registering commands. Returns the same
        subparsers object on subsequent calls.
        """
        if self._subparsers is None:
            self._subparsers = self.parser.add_subparsers(
                title="commands",
                dest="command",
                metavar="COMMAND",
            )
        return self._subparsers

    def parse_args(self, args: list[str] | None = None) -> Namespace:
        """
        Parse command line arguments.

        Handles @gamepad extraction before standard parsing.
        """
        if args is None:
            args = sys.argv[1:]

        gamepad_spec, remaining = self._extract_gamepad_spec(args)

        parsed = self.parser.parse_args(remaining)
        parsed.gamepad_spec = gamepad_spec

        if parsed.no_color:
            self.out = Output(force_color=False)

        return parsed

    def config_overrides(self, parsed: Namespace) -> dict:
        """Settings given on the command line, in ClientConfig terms."""
        overrides = {}
        if parsed.bus is not None:
            overrides["bus"] = parsed.bus
        if parsed.service is not None:
            overrides["service"] = parsed.service
        if parsed.timeout is not None:
            overrides["timeout"] = parsed.timeout
        return overrides

    def error(self, message: str) -> None:
        """Print error message to stderr."""
        print(self.out.error(message), file=sys.stderr)
