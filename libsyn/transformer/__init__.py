"""Fixed-point transformation of token streams with registered macros."""

from .config import DEFAULT_MAX_ITERATIONS, TransformerConfig
from .replacement import generate_replacement
from .transformer import TransformResult, transform_source, transform_tokens

__all__ = (
    "DEFAULT_MAX_ITERATIONS",
    "TransformResult",
    "TransformerConfig",
    "generate_replacement",
    "transform_source",
    "transform_tokens",
)
