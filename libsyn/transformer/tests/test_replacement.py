from libsyn.lexer.tokens import LiteralToken, tokens_to_string
from libsyn.macros.placeholders import parse_replacement
from libsyn.macros.tokenization import tokenize_pattern
from libsyn.transformer.replacement import generate_replacement


def test_replacement_substitutes_captures() -> None:
    replacement = parse_replacement("if (!($(condition)))")
    tokens = generate_replacement(replacement, {"condition": tokenize_pattern("$x === 1")})
    assert tokens_to_string(tokens) == "if (!($x === 1))"


def test_replacement_collapses_whitespace_around_capture() -> None:
    replacement = parse_replacement("{ $(body) }")
    tokens = generate_replacement(replacement, {"body": tokenize_pattern(' echo "x"; ')})
    assert tokens_to_string(tokens) == '{ echo "x"; }'


def test_replacement_keeps_non_plain_whitespace() -> None:
    replacement = parse_replacement("{\n$(body)\n}")
    tokens = generate_replacement(replacement, {"body": tokenize_pattern(" x ")})
    assert tokens_to_string(tokens) == "{\n x \n}"


def test_replacement_empty_capture() -> None:
    replacement = parse_replacement("[$(x)]")
    assert tokens_to_string(generate_replacement(replacement, {"x": []})) == "[]"


def test_replacement_unresolved_reference() -> None:
    replacement = parse_replacement("a $(missing) b")
    tokens = generate_replacement(replacement, {})

    assert LiteralToken(text="$(missing)") in tokens
    assert tokens_to_string(tokens) == "a $(missing) b"


def test_replacement_without_references() -> None:
    replacement = parse_replacement("$this->")
    assert generate_replacement(replacement, {}) == replacement
