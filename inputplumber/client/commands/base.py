#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
Base command class for CLI commands.
"""

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from typing import ClassVar

from inputplumber.client.cli_base import InputPlumberCLI


class Command(ABC):
    """
    Base class for CLI commands.

    Subclasses must implement:
    - name: Command name (used as subparser name)
    - help: Short help text
    - configure_parser(): Add command-specific arguments
    - run(): Execute the command
    """

    name: ClassVar[str]
    help: ClassVar[str]
    aliases: ClassVar[list[str]] = []

    def __init__(self, cli: InputPlumberCLI):
        self.cli = cli

    @property
    def out(self):
        # --no-color replaces the CLI's Output after registration
        return self.cli.out

    @classmethod
    def register(cls, cli: InputPlumberCLI, subparsers) -> "Command":
        """
        Register this command with the CLI.

        Creates the subparser and returns a command instance.
        """
        instance = cls(cli)

        parser = subparsers.add_parser(
            cls.name,
            help=cls.help,
            aliases=cls.aliases,
        )
        instance.configure_parser(parser)
        parser.set_defaults(cmd_instance=instance)

        return instance

    @abstractmethod
    def configure_parser(self, parser: ArgumentParser) -> None:
        """Add command-specific arguments to the parser."""
        ...

    @abstractmethod
    def run(self, args: Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed arguments

        Returns:
            Exit code (0 for success)
        """
        ...

    def print(self, *args, **kwargs):
        """Print to stdout."""
        print(*args, **kwargs)

    def error(self, message: str) -> int:
        """Print error and return exit code 1."""
        print(self.out.error(message))
        return 1
