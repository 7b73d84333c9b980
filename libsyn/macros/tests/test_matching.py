import pytest

from libsyn.lexer.tokens import tokens_to_string
from libsyn.macros.macro import MacroDefinition
from libsyn.macros.matching import find_macros_for_token_sequence
from libsyn.macros.tokenization import tokenize_pattern


def test_match_exact_pattern() -> None:
    macro = MacroDefinition(pattern="$->", replacement="$this->")
    tokens = tokenize_pattern("$->name")

    candidates = find_macros_for_token_sequence([macro], tokens, 0)

    assert len(candidates) == 1
    assert candidates[0].macro is macro
    assert candidates[0].captures == {}
    assert candidates[0].consumed == 2


def test_match_exact_pattern_whitespace_is_significant() -> None:
    macro = MacroDefinition(pattern="a b", replacement="c")
    assert find_macros_for_token_sequence([macro], tokenize_pattern("a  b"), 0) == []
    assert len(find_macros_for_token_sequence([macro], tokenize_pattern("a b"), 0)) == 1


def test_match_empty_capture() -> None:
    macro = MacroDefinition(pattern="($(layer() as x))", replacement="$(x)")
    candidates = find_macros_for_token_sequence([macro], tokenize_pattern("()"), 0)

    assert len(candidates) == 1
    assert candidates[0].captures == {"x": []}
    assert candidates[0].consumed == 2


def test_match_balanced_captures() -> None:
    macro = MacroDefinition(
        pattern="unless ($(layer() as condition)) { $(layer() as body) }",
        replacement="",
    )
    tokens = tokenize_pattern('unless (f($x) === 1) { if ($y) { echo "x"; } } tail')

    [candidate] = find_macros_for_token_sequence([macro], tokens, 0)

    assert tokens_to_string(candidate.captures["condition"]) == "f($x) === 1"
    assert tokens_to_string(candidate.captures["body"]) == ' if ($y) { echo "x"; } '
    assert tokens_to_string(tokens[candidate.consumed :]) == " tail"


def test_match_unclosed_delimiter() -> None:
    macro = MacroDefinition(pattern="f($(layer() as args))", replacement="")
    assert find_macros_for_token_sequence([macro], tokenize_pattern("f(1, 2"), 0) == []


def test_match_trailing_capture_takes_rest() -> None:
    macro = MacroDefinition(pattern="dump $(layer() as value)", replacement="")
    tokens = tokenize_pattern("dump $a + 1;")

    [candidate] = find_macros_for_token_sequence([macro], tokens, 0)

    assert tokens_to_string(candidate.captures["value"]) == " $a + 1;"
    assert candidate.consumed == len(tokens)


def test_match_capture_until_plain_terminator() -> None:
    macro = MacroDefinition(pattern="let $(layer() as name) = ", replacement="")
    tokens = tokenize_pattern("let  $a = 1;")

    [candidate] = find_macros_for_token_sequence([macro], tokens, 0)

    assert tokens_to_string(candidate.captures["name"]) == "$a "
    assert tokens_to_string(tokens[candidate.consumed :]) == " 1;"


def test_match_pattern_not_satisfied() -> None:
    macro = MacroDefinition(pattern="a ($(layer() as x)) b", replacement="")
    assert find_macros_for_token_sequence([macro], tokenize_pattern("a (1)"), 0) == []


def test_match_first_token_prefilter() -> None:
    macro = MacroDefinition(pattern="<-", replacement="")
    tokens = tokenize_pattern("$a -> b")
    assert all(find_macros_for_token_sequence([macro], tokens, idx) == [] for idx in range(len(tokens)))


def test_match_position_out_of_range() -> None:
    macro = MacroDefinition(pattern="a", replacement="")
    tokens = tokenize_pattern("a")

    assert find_macros_for_token_sequence([macro], tokens, 1) == []
    assert find_macros_for_token_sequence([macro], tokens, -1) == []
    assert find_macros_for_token_sequence([macro], [], 0) == []


def test_match_candidates_in_given_order() -> None:
    first = MacroDefinition(pattern="$->", replacement="1")
    second = MacroDefinition(pattern="$->", replacement="2")
    candidates = find_macros_for_token_sequence([second, first], tokenize_pattern("$->"), 0)
    assert [c.macro for c in candidates] == [second, first]


@pytest.mark.parametrize(
    "code",
    [
        "unless /* c */ ($a) { b(); }",
        "unless // c\n($a) { b(); }",
        "unless # c\n($a) /** d */ { b(); }",
    ],
)
def test_match_skips_comments_before_literals(code: str) -> None:
    macro = MacroDefinition(
        pattern="unless ($(layer() as condition)) { $(layer() as body) }",
        replacement="",
    )
    tokens = tokenize_pattern(code)

    [candidate] = find_macros_for_token_sequence([macro], tokens, 0)

    assert tokens_to_string(candidate.captures["condition"]) == "$a"
    assert tokens_to_string(candidate.captures["body"]) == " b(); "
    assert candidate.consumed == len(tokens)
