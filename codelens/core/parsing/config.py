"""
Parsing configuration data structures.

Defines LineLists and LanguageConfig, one row of the static language
table. A LanguageConfig names where the grammar and its query files
live and which node kinds drive line classification.

Design principle: New languages are added via config, not code changes.
"""

from dataclasses import dataclass
from typing import Optional, Set, Tuple

from .language import Language


# Applied to every language without a bespoke pair: only the root node is
# visited and its boundary lines are ignored.
DEFAULT_CODE_LENS_LIST: Tuple[str, ...] = ("source_file",)
DEFAULT_CODE_LENS_IGNORE_LIST: Tuple[str, ...] = ("source_file",)


@dataclass(frozen=True)
class LineLists:
    """
    Node-kind lists that drive the line classifier.

    Attributes:
        expand: Node kinds whose children are walked
        ignore: Node kinds whose start/end lines are never marked
    """
    expand: Tuple[str, ...]
    ignore: Tuple[str, ...]


DEFAULT_LINE_LISTS = LineLists(
    expand=DEFAULT_CODE_LENS_LIST,
    ignore=DEFAULT_CODE_LENS_IGNORE_LIST,
)


@dataclass
class LanguageConfig:
    """
    Configuration for one supported language.

    Attributes:
        language: Language tag this row describes
        name: Human-readable name (e.g., "Rust", "TSX")
        extensions: File extensions, without the dot (e.g., {'rs'})
        grammar_module: Importable grammar package (e.g., "tree_sitter_rust")
        language_func: Function in grammar_module returning the grammar pointer
        highlight_queries: Query files under the package's queries/ directory,
            concatenated in order to form the highlight query
        injection_queries: Injection query files (none by default)
        locals_queries: Locals query files (none by default)
        line_lists: Bespoke classifier lists, or None for the default pair
    """
    # Identity
    language: Language
    name: str
    extensions: Set[str]

    # Grammar provider
    grammar_module: str
    language_func: str = "language"
    highlight_queries: Tuple[str, ...] = ("highlights.scm",)
    injection_queries: Tuple[str, ...] = ()
    locals_queries: Tuple[str, ...] = ()

    # Line classification
    line_lists: Optional[LineLists] = None

    @property
    def effective_line_lists(self) -> LineLists:
        """Bespoke lists when defined, otherwise the default pair."""
        return self.line_lists if self.line_lists is not None else DEFAULT_LINE_LISTS
