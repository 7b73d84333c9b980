"""Syn preprocessor toolchain.

Provides macro loading, configuration, plugins, processing of source trees and CLI.
"""

from .config import Configuration
from .processor import FileProcessingResult, Processor

__all__ = [
    "Configuration",
    "FileProcessingResult",
    "Processor",
]
