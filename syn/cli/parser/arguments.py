from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole Syn toolchain process."""

    input_path: Path | None
    output_path: Path | None

    config_path: Path | None
    macro_directories: list[Path]
    macro_files: list[Path]

    max_iterations: int | None
    legacy_single_token_fallback: bool

    version: bool
    verbose: bool

    cli_debug_user_friendly_errors: bool


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    return CLIArguments(
        input_path=Path(args.input) if args.input else None,
        output_path=Path(args.output) if args.output else None,
        config_path=Path(args.config) if args.config else None,
        macro_directories=[Path(p) for p in args.macro_directories],
        macro_files=[Path(p) for p in args.macro_files],
        max_iterations=args.max_iterations,
        legacy_single_token_fallback=bool(args.legacy_single_token_fallback),
        version=bool(args.version),
        verbose=bool(args.verbose),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )
