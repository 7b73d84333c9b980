import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libsyn.exceptions import SynError
from syn.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_syn_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit Syn internal errors."""
    try:
        yield
    except SynError as se:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(se))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except OSError as oe:
        cli_message("ERROR", f"I/O failure: {oe}")
        return sys.exit(1)
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
