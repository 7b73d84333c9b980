from __future__ import annotations

from typing import TYPE_CHECKING

from libsyn.lexer._state import LexerState
from libsyn.lexer.helpers import (
    HEREDOC_START,
    NAMESPACE_SEPARATOR,
    OPERATORS,
    find_block_comment_end,
    find_heredoc_end,
    find_identifier_end,
    find_line_comment_end,
    find_number_end,
    find_quoted_literal_end,
    find_whitespace_end,
    is_identifier_start,
)
from libsyn.lexer.keywords import is_keyword
from libsyn.lexer.tokens import LexedToken, LiteralToken, Token, TokenKind

if TYPE_CHECKING:
    from collections.abc import Generator


OPEN_TAG = "<?php"
OPEN_TAG_WITH_ECHO = "<?="
CLOSE_TAG = "?>"

QUOTES = ("'", '"', "`")
VARIABLE_MARK = "$"


def tokenize_from_raw(source: str, *, inline_html: bool = True) -> Generator[Token]:
    """Stream lexical tokens of an host language source via generator (perform lexical analysis).

    Lexer is total: it never raises, unterminated strings and comments are consumed until end of source.
    Concatenation of all token texts is always equal to given source.

    :param inline_html: If set, lexer starts in template mode and expects open tag (`<?php`) before code,
    otherwise whole source is treated as code (used for macro patterns and replacements).
    :returns tokenizer: Generator of tokens, in order from top to bottom of an source
    """
    state = LexerState(source=source, in_code=not inline_html)

    while not state.exhausted:
        if state.in_code:
            yield _tokenize_code_token(state)
            continue
        yield from _tokenize_inline_html(state)


def _tokenize_inline_html(state: LexerState) -> Generator[Token]:
    """Tokenize template text until (and including) next open tag."""
    lowered = state.source.lower()
    candidates = [
        idx
        for idx in (
            lowered.find(OPEN_TAG, state.cursor),
            lowered.find(OPEN_TAG_WITH_ECHO, state.cursor),
        )
        if idx != -1
    ]

    if not candidates:
        text, line = state.consume_until(len(state.source))
        yield LexedToken(kind=TokenKind.INLINE_HTML, text=text, line=line)
        return

    tag_at = min(candidates)
    if tag_at > state.cursor:
        text, line = state.consume_until(tag_at)
        yield LexedToken(kind=TokenKind.INLINE_HTML, text=text, line=line)

    if state.startswith(OPEN_TAG_WITH_ECHO):
        tag_ends_at = tag_at + len(OPEN_TAG_WITH_ECHO)
    else:
        # Open tag owns single whitespace (or line break) that follows it
        tag_ends_at = tag_at + len(OPEN_TAG)
        if state.source.startswith("\r\n", tag_ends_at):
            tag_ends_at += 2
        elif tag_ends_at < len(state.source) and state.source[tag_ends_at].isspace():
            tag_ends_at += 1

    text, line = state.consume_until(tag_ends_at)
    state.in_code = True
    yield LexedToken(kind=TokenKind.OPEN_TAG, text=text, line=line)


def _tokenize_code_token(state: LexerState) -> Token:
    """Acquire next token from code block and advance state past it."""
    symbol = state.peek()

    if state.startswith(CLOSE_TAG):
        return _tokenize_close_tag(state)

    if symbol.isspace():
        return _lexed(state, TokenKind.WHITESPACE, find_whitespace_end(state.source, state.cursor))

    if (symbol == "#" and state.peek(1) != "[") or state.startswith("//"):
        return _lexed(state, TokenKind.COMMENT, find_line_comment_end(state.source, state.cursor))

    if state.startswith("/*"):
        is_doc = state.startswith("/**") and state.peek(3).isspace()
        kind = TokenKind.DOC_COMMENT if is_doc else TokenKind.COMMENT
        return _lexed(state, kind, find_block_comment_end(state.source, state.cursor))

    if symbol in QUOTES:
        ends_at = find_quoted_literal_end(state.source, state.cursor, quote=symbol)
        return _lexed(state, TokenKind.STRING, ends_at)

    if symbol == VARIABLE_MARK and is_identifier_start(state.peek(1)):
        ends_at = find_identifier_end(state.source, state.cursor + 1)
        return _lexed(state, TokenKind.VARIABLE, ends_at)

    if symbol.isdigit() or (symbol == "." and state.peek(1).isdigit()):
        ends_at, is_fp = find_number_end(state.source, state.cursor)
        return _lexed(state, TokenKind.FLOAT if is_fp else TokenKind.INTEGER, ends_at)

    if is_identifier_start(symbol) or (
        symbol == NAMESPACE_SEPARATOR and is_identifier_start(state.peek(1))
    ):
        ends_at = find_identifier_end(state.source, state.cursor + 1)
        word = state.source[state.cursor : ends_at]
        kind = TokenKind.KEYWORD if is_keyword(word) else TokenKind.IDENTIFIER
        return _lexed(state, kind, ends_at)

    if state.startswith(HEREDOC_START):
        heredoc_ends_at = find_heredoc_end(state.source, state.cursor)
        if heredoc_ends_at is not None:
            return _lexed(state, TokenKind.STRING, heredoc_ends_at)

    for operator in OPERATORS:
        if state.startswith(operator):
            return _lexed(state, TokenKind.OPERATOR, state.cursor + len(operator))

    # Any other single character is an bare literal token
    text, _ = state.consume_until(state.cursor + 1)
    return LiteralToken(text=text)


def _tokenize_close_tag(state: LexerState) -> Token:
    """Close tag owns single line break that follows it and returns lexer into template mode."""
    ends_at = state.cursor + len(CLOSE_TAG)
    if state.source.startswith("\r\n", ends_at):
        ends_at += 2
    elif state.source.startswith("\n", ends_at):
        ends_at += 1

    token = _lexed(state, TokenKind.CLOSE_TAG, ends_at)
    state.in_code = False
    return token


def _lexed(state: LexerState, kind: TokenKind, ends_at: int) -> LexedToken:
    text, line = state.consume_until(ends_at)
    return LexedToken(kind=kind, text=text, line=line)
