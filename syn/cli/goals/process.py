from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from syn.cli.output import cli_fatal_abort, cli_message
from syn.config import (
    Configuration,
    load_configuration_from_file,
    merge_into_configuration,
)
from syn.processor import FileProcessingResult, Processor

if TYPE_CHECKING:
    from syn.cli.parser.arguments import CLIArguments


def cli_perform_process_goal(args: CLIArguments) -> NoReturn:
    """Perform process goal that transforms input file or directory into output one."""
    if args.input_path is None:
        return cli_fatal_abort("Expected input file or directory to process!")

    if args.output_path is None:
        return cli_fatal_abort("Output path is required, please specify it via `--out`!")

    config = _build_configuration(args)
    processor = Processor(config)
    cli_message(
        "INFO",
        f"Loaded {processor.registry.count()} macro(s) in total",
        verbose=config.verbose,
    )

    results = processor.process(args.input_path, args.output_path)
    if config.verbose:
        _emit_results_table(results)

    cli_message("INFO", f"Processed {len(results)} file(s) successfully")
    return sys.exit(0)


def _build_configuration(args: CLIArguments) -> Configuration:
    config = (
        load_configuration_from_file(args.config_path)
        if args.config_path
        else Configuration()
    )
    return merge_into_configuration(config, args)


def _emit_results_table(results: list[FileProcessingResult]) -> None:
    headers = ("File", "Lines", "Iterations", "Converged")
    rows = [
        (str(r.file), str(r.lines), str(r.iterations), "yes" if r.converged else "no")
        for r in results
    ]
    widths = [max(len(cell) for cell in column) for column in zip(headers, *rows, strict=False)]

    for row in (headers, *rows):
        print("  ".join(cell.ljust(width) for cell, width in zip(row, widths, strict=True)))
