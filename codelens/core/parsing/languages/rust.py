"""
Rust language configuration.

Folding regions in Rust live inside impl blocks and trait definitions,
so the classifier expands those and their declaration lists. Imports
and line comments never count as significant.
"""

from ..config import LanguageConfig, LineLists
from ..language import Language


RUST_CODE_LENS_LIST = (
    "source_file",
    "impl_item",
    "trait_item",
    "declaration_list",
)

RUST_CODE_LENS_IGNORE_LIST = (
    "source_file",
    "use_declaration",
    "line_comment",
)

RUST_CONFIG = LanguageConfig(
    language=Language.RUST,
    name="Rust",
    extensions={'rs'},
    grammar_module="tree_sitter_rust",
    line_lists=LineLists(
        expand=RUST_CODE_LENS_LIST,
        ignore=RUST_CODE_LENS_IGNORE_LIST,
    ),
)
