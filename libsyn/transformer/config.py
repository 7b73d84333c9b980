from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 3


@dataclass(frozen=True)
class TransformerConfig:
    """Configuration for the transformation loop.

    `legacy_single_token_fallback` is disabled by default, although historically Syn always
    applied that fallback: when no macro matches at position, any macro whose
    first pattern token equals current token is applied, consuming single token and ignoring rest
    of the pattern. That rewrites input which does not match the pattern, so it is opt-in here.

    Values coming from users are validated by the toolchain, assertions here guard library callers.
    """

    # Safety bound for the fixed-point loop, as termination is not guaranteed for arbitrary macro sets
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    legacy_single_token_fallback: bool = False

    def __post_init__(self) -> None:
        assert self.max_iterations > 0, "Transformer must perform at least one iteration"
