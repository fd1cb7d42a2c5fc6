"""
TypeScript and TSX language configurations.

tree-sitter-typescript ships two grammars in one package, exposed through
language_typescript() and language_tsx(). Both use the TypeScript
highlight query.
"""

from ..config import LanguageConfig
from ..language import Language


TYPESCRIPT_CONFIG = LanguageConfig(
    language=Language.TYPESCRIPT,
    name="TypeScript",
    extensions={'ts'},
    grammar_module="tree_sitter_typescript",
    language_func="language_typescript",
)

TSX_CONFIG = LanguageConfig(
    language=Language.TSX,
    name="TSX",
    extensions={'tsx'},
    grammar_module="tree_sitter_typescript",
    language_func="language_tsx",
)
