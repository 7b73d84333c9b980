import pytest

from libsyn.macros.definitions import parse_macro_from_line, parse_macros_from_text


def test_parse_macro_from_line() -> None:
    macro = parse_macro_from_line("$(macro) { $-> } >> { $this-> }", "a.syn", 7)

    assert macro is not None
    assert macro.pattern == "$->"
    assert macro.replacement == "$this->"
    assert macro.file == "a.syn"
    assert macro.line == 7


def test_parse_macro_from_line_nested_braces() -> None:
    macro = parse_macro_from_line(
        "$(macro) { unless ($(layer() as condition)) { $(layer() as body) } } >> { if (!($(condition))) { $(body) } }",
    )

    assert macro is not None
    assert macro.pattern == "unless ($(layer() as condition)) { $(layer() as body) }"
    assert macro.replacement == "if (!($(condition))) { $(body) }"


def test_parse_macro_from_line_empty_replacement() -> None:
    macro = parse_macro_from_line("$(macro) { debug(); } >> { }")
    assert macro is not None
    assert macro.replacement == ""


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "# $(macro) { a } >> { b }",
        "// $(macro) { a } >> { b }",
        "macro { a } >> { b }",
        "$(macro) { a >> { b }",
        "$(macro) { a } { b }",
        "$(macro) { a } >> b",
        "$(macro) { a } >> { b",
        "$(macro) { } >> { b }",
        "$(macro) { $(layer() as x) } >> { b }",
    ],
)
def test_parse_macro_from_line_invalid(line: str) -> None:
    assert parse_macro_from_line(line) is None


def test_parse_macros_from_text_skips_invalid_lines() -> None:
    content = "\n".join(
        (
            "# Arrow shorthand",
            "$(macro) { $-> } >> { $this-> }",
            "$(macro) { broken",
            "",
            "$(macro) { __ } >> { null }",
        ),
    )
    macros = parse_macros_from_text(content, source_file="shorthands.syn")

    assert [m.pattern for m in macros] == ["$->", "__"]
    assert [m.line for m in macros] == [2, 5]
    assert all(m.file == "shorthands.syn" for m in macros)
