"""
Language tags — The closed set of languages Codelens understands.

A Language is chosen once per file from its extension and then used as a
key into the registry for grammar, highlight query and line lists.

Usage:
    Language.from_path(Path("main.go"))   # Language.GO
    Language.from_path(Path("README"))    # None
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class Language(Enum):
    """Supported languages. Values are stable lowercase names."""
    RUST = "rust"
    GO = "go"
    JAVASCRIPT = "javascript"
    JSX = "jsx"
    TYPESCRIPT = "typescript"
    TSX = "tsx"
    PYTHON = "python"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> Optional['Language']:
        """Identify a language from a file path using the default registry."""
        from .registry import default_registry
        return default_registry().identify(path)

    @classmethod
    def from_name(cls, name: str) -> Optional['Language']:
        """
        Look up a language by its value (e.g., "rust", "tsx").

        Returns:
            Language if the name is known, None otherwise
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None
