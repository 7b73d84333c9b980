import sys
from typing import Literal, NoReturn, TypeAlias

MESSAGE_LEVEL: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

CLI_MESSAGE_PREFIX = "[Syn]"

_LEVEL_COLORS: dict[str, str] = {
    "INFO": "\033[94m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
}
_COLOR_RESET = "\033[0m"


def cli_message(
    level: MESSAGE_LEVEL,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit an message from toolchain into console.

    `INFO` messages are emitted only when verbose, warnings and errors are always emitted (into stderr).
    """
    if level == "INFO" and not verbose:
        return

    stream = sys.stdout if level == "INFO" else sys.stderr
    label = f"[{level}]"
    if stream.isatty():
        label = f"{_LEVEL_COLORS[level]}{label}{_COLOR_RESET}"
    print(f"{CLI_MESSAGE_PREFIX} {label} {text}", file=stream)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error and terminate toolchain with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
