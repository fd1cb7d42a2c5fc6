"""
Go language configuration.

The classifier expands type declarations down to interface method
lists, so each method of an interface is its own significant line.
"""

from ..config import LanguageConfig, LineLists
from ..language import Language


GO_CODE_LENS_LIST = (
    "source_file",
    "type_declaration",
    "type_spec",
    "interface_type",
    "method_spec_list",
)

# line_comment does not occur in tree-sitter-go trees.
GO_CODE_LENS_IGNORE_LIST = (
    "source_file",
    "comment",
    "line_comment",
)

GO_CONFIG = LanguageConfig(
    language=Language.GO,
    name="Go",
    extensions={'go'},
    grammar_module="tree_sitter_go",
    line_lists=LineLists(
        expand=GO_CODE_LENS_LIST,
        ignore=GO_CODE_LENS_IGNORE_LIST,
    ),
)
