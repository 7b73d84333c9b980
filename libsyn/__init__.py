"""Syn macro preprocessor library.

Provides token model, host (PHP) lexer, macro engine and transformer.
"""

from .macros import MacroDefinition, MacrosRegistry
from .transformer import TransformerConfig, TransformResult, transform_source

__all__ = [
    "MacroDefinition",
    "MacrosRegistry",
    "TransformResult",
    "TransformerConfig",
    "transform_source",
]
