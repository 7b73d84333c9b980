from .lexer import tokenize_from_raw
from .tokens import (
    CapturePlaceholder,
    LexedToken,
    LiteralToken,
    Token,
    TokenKind,
    VariableReference,
    tokens_to_string,
)

__all__ = [
    "CapturePlaceholder",
    "LexedToken",
    "LiteralToken",
    "Token",
    "TokenKind",
    "VariableReference",
    "tokenize_from_raw",
    "tokens_to_string",
]
