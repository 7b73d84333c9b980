from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from syn.cli.errors import cli_syn_error_handler
from syn.cli.goals import perform_desired_toolchain_goal
from syn.cli.parser.arguments import parse_cli_arguments
from syn.cli.parser.builder import build_cli_parser

from .executable import cli_get_executable_program
from .output import cli_message

if TYPE_CHECKING:
    from collections.abc import Sequence

    from syn.cli.parser.arguments import CLIArguments


def cli_entry_point(prog: str | None = None, argv: Sequence[str] | None = None) -> None:
    """Run Syn toolchain with given (or process) arguments, always terminates via `sys.exit`."""
    args = _read_cli_arguments(prog, argv)

    # Syn errors raised while processing are reported as messages, not tracebacks
    with cli_syn_error_handler(debug_user_friendly_errors=args.cli_debug_user_friendly_errors):
        perform_desired_toolchain_goal(args)

    # Goals exit by themselves, reaching that is an toolchain bug
    cli_message("ERROR", "Bug in Syn CLI: goal returned without exit code!")
    sys.exit(1)


def _read_cli_arguments(prog: str | None, argv: Sequence[str] | None) -> CLIArguments:
    """Parse arguments, argparse itself exits with usage error (code 2) on malformed ones."""
    parser = build_cli_parser(
        cli_get_executable_program(override=prog, warn_proper_installation=True),
    )
    return parse_cli_arguments(parser.parse_args(argv))


if __name__ == "__main__":
    cli_entry_point()
