from libsyn.lexer.tokens import LexedToken, TokenKind
from libsyn.macros.tokenization import tokenize_generic, tokenize_pattern


def test_tokenize_generic_splits_delimiters() -> None:
    assert tokenize_generic("unless (__CAPTURE_0__) { __CAPTURE_1__ }") == [
        "unless",
        "(",
        "__CAPTURE_0__",
        ")",
        "{",
        "__CAPTURE_1__",
        "}",
    ]


def test_tokenize_generic_keeps_runs() -> None:
    assert tokenize_generic("$a->b  +=  1") == ["$a->b", "+=", "1"]


def test_tokenize_generic_marker_inside_run() -> None:
    assert tokenize_generic("x__CAPTURE_0__y") == ["x", "__CAPTURE_0__", "y"]


def test_tokenize_generic_empty() -> None:
    assert tokenize_generic("   ") == []


def test_tokenize_pattern_is_code_mode() -> None:
    tokens = tokenize_pattern("$this->")
    assert tokens == [
        LexedToken(kind=TokenKind.VARIABLE, text="$this"),
        LexedToken(kind=TokenKind.OPERATOR, text="->"),
    ]
