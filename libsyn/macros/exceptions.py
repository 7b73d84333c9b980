from pathlib import Path

from libsyn.exceptions import SynError


class MacroError(SynError):
    """Parent for errors related to macro definitions."""


class MacroDefinitionError(MacroError):
    """Macro definition cannot produce an usable macro (fails at construction time)."""


class MacroEmptyPatternError(MacroDefinitionError):
    def __init__(self, file: str | None, line: int | None) -> None:
        self.file = file
        self.line = line

    def __repr__(self) -> str:
        return f"""Macro defined at {_format_location(self.file, self.line)} has an empty pattern!

Empty pattern cannot match anything, please specify at least one token to match.

{self.generic_error_name}"""


class MacroLeadingCaptureError(MacroDefinitionError):
    def __init__(self, pattern: str, file: str | None, line: int | None) -> None:
        self.pattern = pattern
        self.file = file
        self.line = line

    def __repr__(self) -> str:
        return f"""Macro pattern `{self.pattern}` defined at {_format_location(self.file, self.line)} starts with capture!

Macros are looked up by their first pattern token, so pattern must begin with an literal token.

{self.generic_error_name}"""


class MacroFileNotFoundError(MacroError):
    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"""Macro file '{self.path}' not found!

Did you mistype path to an macro definitions file (`.syn`)?

{self.generic_error_name}"""


class MacroDirectoryNotFoundError(MacroError):
    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"""Macro directory '{self.path}' not found!

{self.generic_error_name}"""


def _format_location(file: str | None, line: int | None) -> str:
    if file is None:
        return "'(in-memory)'"
    if line is None:
        return f"'{file}'"
    return f"'{file}:{line}'"
