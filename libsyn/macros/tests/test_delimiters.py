from libsyn.macros.delimiters import find_matching_brace, get_opening_delimiter, is_closing_delimiter


def test_closing_delimiters() -> None:
    assert is_closing_delimiter(")")
    assert is_closing_delimiter("]")
    assert is_closing_delimiter("}")
    assert not is_closing_delimiter("(")
    assert not is_closing_delimiter(";")


def test_get_opening_delimiter() -> None:
    assert get_opening_delimiter(")") == "("
    assert get_opening_delimiter("}") == "{"
    assert get_opening_delimiter("]") == "["
    assert get_opening_delimiter("x") is None


def test_find_matching_brace_nested() -> None:
    text = "{ a { b } c } d"
    assert find_matching_brace(text, 0) == 12
    assert find_matching_brace(text, 4) == 8


def test_find_matching_brace_ignores_other_brackets() -> None:
    assert find_matching_brace("{ ( ] }", 0) == 6


def test_find_matching_brace_unclosed() -> None:
    assert find_matching_brace("{ a { b }", 0) is None
