from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=False)
class LexerState:
    """State for lexical analysis which only required for internal usages."""

    source: str

    cursor: int = 0
    line: int = 1

    # Is lexer inside of code block (e.g after `<?php`) or inside template (inline HTML)
    in_code: bool = True

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """Get character at cursor (with offset) or empty string if out of source."""
        idx = self.cursor + offset
        if idx >= len(self.source):
            return ""
        return self.source[idx]

    def startswith(self, prefix: str, *, ignore_case: bool = False) -> bool:
        chunk = self.source[self.cursor : self.cursor + len(prefix)]
        if ignore_case:
            return chunk.lower() == prefix.lower()
        return chunk == prefix

    def consume_until(self, ends_at: int) -> tuple[str, int]:
        """Consume text from cursor until given index, returning that text and line where it started."""
        assert ends_at > self.cursor, "Lexer must consume at least one character"
        text = self.source[self.cursor : ends_at]
        line = self.line

        self.cursor = ends_at
        self.line += text.count("\n")
        return text, line
