#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
CLI main entry point.

Run with:
    python -m inputplumber.client.main
    or via the 'inputplumber' console script
"""

import logging
import sys

from inputplumber.client.cli_base import InputPlumberCLI
from inputplumber.client.commands import COMMANDS
from inputplumber.client.gamepad_service import get_gamepad_service, init_gamepad_service
from inputplumber.config import load_config
from inputplumber.log import Log


def main(args: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    cli = InputPlumberCLI()

    subparsers = cli.add_subparsers()
    for cmd_cls in COMMANDS:
        cmd_cls.register(cli, subparsers)

    parsed = cli.parse_args(args)

    if parsed.debug:
        Log.set_level(logging.DEBUG)
    Log.enable_color(cli.out.color_enabled)

    if getattr(parsed, "command", None) is None or not hasattr(parsed, "cmd_instance"):
        cli.parser.print_help()
        return 0

    try:
        config = load_config(parsed.config).merged(cli.config_overrides(parsed))
        init_gamepad_service(config)
        return parsed.cmd_instance.run(parsed)
    except KeyboardInterrupt:
        print()  # Clean line after ^C
        return 130
    except Exception as e:
        if parsed.debug:
            raise
        cli.error(str(e))
        return 1
    finally:
        get_gamepad_service().close()


def cli_entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
