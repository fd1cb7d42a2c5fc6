"""
JavaScript and JSX language configurations.

Both tags share the tree-sitter-javascript grammar. JSX puts the JSX
highlight patterns ahead of the plain JavaScript ones so JSX tags win.
No bespoke classifier lists yet; the default pair applies.
"""

from ..config import LanguageConfig
from ..language import Language


JAVASCRIPT_CONFIG = LanguageConfig(
    language=Language.JAVASCRIPT,
    name="JavaScript",
    extensions={'js'},
    grammar_module="tree_sitter_javascript",
)

JSX_CONFIG = LanguageConfig(
    language=Language.JSX,
    name="JSX",
    extensions={'jsx'},
    grammar_module="tree_sitter_javascript",
    highlight_queries=("highlights-jsx.scm", "highlights.scm"),
)
