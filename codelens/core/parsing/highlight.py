"""
HighlightConfiguration — Compiled highlight query for one language.

Holds what a syntax highlighter needs from a grammar: the grammar
itself, the compiled query, and the capture names the query defines.
The highlighter calls configure() with the highlight names it knows
how to style; each capture is then mapped to one of those names.

Query text is combined in the order injections, locals, highlights,
so earlier patterns take precedence for overlapping captures.

Usage:
    config = HighlightConfiguration(grammar, highlights_query)
    config.configure(["keyword", "function", "type"])
    config.highlight_indices   # e.g. [0, 1, None, 2, ...]
"""

import logging
from typing import List, Optional, Sequence

import tree_sitter

logger = logging.getLogger(__name__)


# Highlight names styled by default when the caller does not supply any.
DEFAULT_HIGHLIGHT_NAMES = [
    "attribute",
    "comment",
    "constant",
    "constant.builtin",
    "constructor",
    "embedded",
    "escape",
    "function",
    "function.builtin",
    "function.method",
    "keyword",
    "label",
    "module",
    "number",
    "operator",
    "property",
    "punctuation",
    "punctuation.bracket",
    "punctuation.delimiter",
    "string",
    "string.special",
    "tag",
    "type",
    "type.builtin",
    "variable",
    "variable.builtin",
    "variable.parameter",
]


class HighlightConfiguration:
    """
    Compiled highlight query bound to a grammar.

    Attributes:
        language: tree_sitter.Language the query was compiled against
        query: Compiled tree_sitter.Query
        capture_names: Capture names in capture-index order
        highlight_indices: Per capture, the index of the recognized
            highlight name it maps to, or None (all None until configure)
    """

    def __init__(
        self,
        language: tree_sitter.Language,
        highlights_query: str,
        injection_query: str = "",
        locals_query: str = "",
    ):
        """
        Compile the combined query.

        Raises:
            The binding's query error for malformed query text;
            make_highlight_config wraps it as GrammarError
        """
        self.language = language
        source = "\n".join(
            part for part in (injection_query, locals_query, highlights_query) if part
        )
        self.query = tree_sitter.Query(language, source)
        self.capture_names: List[str] = [
            self.query.capture_name(i) for i in range(self.query.capture_count)
        ]
        self.highlight_indices: List[Optional[int]] = [None] * len(self.capture_names)

    def configure(self, recognized_names: Sequence[str]) -> None:
        """
        Map each capture name to the best matching recognized name.

        A recognized name matches a capture when its dot-separated parts
        are a prefix of the capture's parts ("function" matches
        "function.method"). The match with the most parts wins; ties go
        to the earlier recognized name.

        Args:
            recognized_names: Highlight names the renderer can style
        """
        split_names = [name.split('.') for name in recognized_names]
        indices: List[Optional[int]] = []
        for capture_name in self.capture_names:
            capture_parts = capture_name.split('.')
            best_index = None
            best_len = 0
            for index, parts in enumerate(split_names):
                if len(parts) > best_len and capture_parts[:len(parts)] == parts:
                    best_index = index
                    best_len = len(parts)
            indices.append(best_index)
        self.highlight_indices = indices

        mapped = sum(1 for i in indices if i is not None)
        logger.debug(
            "Configured highlights: %d of %d captures mapped", mapped, len(indices)
        )
