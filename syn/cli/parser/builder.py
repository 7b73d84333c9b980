import argparse
from argparse import ArgumentParser


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Syn - macro preprocessor for PHP sources with custom syntax (`.syn.php`, `.syn` files)",
        usage=f"{prog} input [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "input",
        help="Input source file or directory to process",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--out",
        "-o",
        dest="output",
        required=False,
        help="Output file or directory",
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    _add_macros_group(parser)
    _add_transformer_group(parser)
    _add_logging_group(parser)
    return parser


def _add_macros_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with macro sources into given parser."""
    group = parser.add_argument_group("Macros", "Where macro definitions come from")
    group.add_argument(
        "--macro-dir",
        "-m",
        dest="macro_directories",
        action="append",
        default=[],
        help="Directory containing macro definitions (`.syn` files), may be passed multiple times",
    )
    group.add_argument(
        "--macro-file",
        "-f",
        dest="macro_files",
        action="append",
        default=[],
        help="Specific macro definitions file, may be passed multiple times",
    )
    group.add_argument(
        "--config",
        "-c",
        required=False,
        help="Configuration file (TOML)",
    )


def _add_transformer_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with transformer options into given parser."""
    group = parser.add_argument_group("Transformer", "Macro application loop")
    group.add_argument(
        "--max-iterations",
        type=_positive_int,
        default=None,
        help="Safety limit of transformation iterations (default: 3)",
    )
    group.add_argument(
        "--legacy-single-token-fallback",
        action="store_true",
        default=False,
        help="Apply macros whose first pattern token matches even if rest of the pattern does not",
    )


def _add_logging_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with logging options into given parser."""
    group = parser.add_argument_group("Logging", "Output verbosity")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs and processing results table.",
    )

    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )


def _positive_int(value: str) -> int:
    """Argument type for counters that must be at least 1."""
    try:
        number = int(value)
    except ValueError as e:
        msg = f"invalid int value: '{value}'"
        raise argparse.ArgumentTypeError(msg) from e
    if number < 1:
        msg = f"must be at least 1, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number
