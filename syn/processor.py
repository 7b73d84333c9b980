from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from libsyn.macros.registry import MacrosRegistry
from libsyn.transformer import TransformResult, transform_source

from .cli.output import cli_message
from .exceptions import InputPathNotFoundError
from .loading import load_macros_from_directory, load_macros_from_file
from .plugins import PluginManager

if TYPE_CHECKING:
    from .config import Configuration

# Suffixes of an sources with custom syntax, longest first
SOURCE_SUFFIXES = (".syn.php", ".syn")
OUTPUT_SUFFIX = ".php"


@dataclass(frozen=True)
class FileProcessingResult:
    """Outcome of processing single source file."""

    file: Path
    output: Path

    # Lines within input source
    lines: int

    iterations: int
    converged: bool


class Processor:
    """Processing session: owns an macro registry built from configuration and transforms sources with it."""

    def __init__(
        self,
        config: Configuration,
        *,
        plugins: PluginManager | None = None,
    ) -> None:
        self.config = config
        self.registry = MacrosRegistry()
        self.plugins = plugins or PluginManager()

        self._register_plugins()
        self._load_macros()

    def process(self, input_path: Path, output_path: Path) -> list[FileProcessingResult]:
        """Process single source file or whole directory of sources into output path."""
        if input_path.is_file():
            return [self.process_file(input_path, output_path)]
        if input_path.is_dir():
            return self.process_directory(input_path, output_path)
        raise InputPathNotFoundError(path=input_path)

    def process_file(self, input_file: Path, output_path: Path) -> FileProcessingResult:
        """Transform source file, output path may be an existing directory where `<name>.php` is placed."""
        if not input_file.is_file():
            raise InputPathNotFoundError(path=input_file)

        output_file = output_path
        if output_path.is_dir():
            output_file = output_path / output_filename(input_file)
        return self._transform_into(input_file, output_file)

    def process_directory(self, input_dir: Path, output_dir: Path) -> list[FileProcessingResult]:
        """Transform all sources within directory (recursively), mirroring their relative paths."""
        if not input_dir.is_dir():
            raise InputPathNotFoundError(path=input_dir)

        output_dir.mkdir(parents=True, exist_ok=True)

        results: list[FileProcessingResult] = []
        for source in sorted(input_dir.rglob("*")):
            if not source.is_file() or not source.name.endswith(SOURCE_SUFFIXES):
                continue
            relative = source.relative_to(input_dir).with_name(output_filename(source))
            results.append(self._transform_into(source, output_dir / relative))
        return results

    def transform(self, code: str) -> TransformResult:
        return transform_source(code, self.registry, self.config.transformer_config())

    def _transform_into(self, input_file: Path, output_file: Path) -> FileProcessingResult:
        code = input_file.read_text(encoding="utf-8")
        result = self.transform(code)

        if not result.converged:
            cli_message(
                "WARNING",
                f"Macros for '{input_file}' were still applying after {result.iterations} iteration(s), output may be partially transformed!",
            )

        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(result.text, encoding="utf-8")
        cli_message(
            "INFO",
            f"Processed '{input_file}' into '{output_file}'",
            verbose=self.config.verbose,
        )

        return FileProcessingResult(
            file=input_file,
            output=output_file,
            lines=code.count("\n") + 1,
            iterations=result.iterations,
            converged=result.converged,
        )

    def _register_plugins(self) -> None:
        for import_path in self.config.plugins:
            self.plugins.register_plugin(import_path)
        self.plugins.initialize_plugins(self.config.plugin_settings)

    def _load_macros(self) -> None:
        for directory in self.config.macro_directories:
            if not directory.is_dir():
                cli_message("WARNING", f"Macro directory '{directory}' not found, it will be skipped!")
                continue
            loaded = load_macros_from_directory(self.registry, directory)
            cli_message("INFO", f"Loaded {loaded} macro(s) from '{directory}'", verbose=self.config.verbose)

        for file in self.config.macro_files:
            if not file.is_file():
                cli_message("WARNING", f"Macro file '{file}' not found, it will be skipped!")
                continue
            loaded = load_macros_from_file(self.registry, file)
            cli_message("INFO", f"Loaded {loaded} macro(s) from '{file}'", verbose=self.config.verbose)

        self.registry.extend(self.plugins.get_all_macros())

        for macro in self.registry:
            if unresolved := macro.unresolved_references:
                cli_message(
                    "WARNING",
                    f"Macro `{macro.pattern}` references unknown capture(s) {', '.join(unresolved)}, they will be emitted as-is!",
                )


def output_filename(source: Path) -> str:
    """Name of an output file for given source (custom syntax suffix is replaced with `.php`)."""
    for suffix in SOURCE_SUFFIXES:
        if source.name.endswith(suffix):
            return source.name.removesuffix(suffix) + OUTPUT_SUFFIX
    return source.name
