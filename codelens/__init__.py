"""
Codelens — Language identification and fold-line classification

Picks the tree-sitter grammar and highlight query for a source file,
then walks the parsed tree to find the lines that belong to foldable
regions (type bodies, trait/interface blocks, impl blocks).

Usage:
    from codelens import Language, make_parser, classify

    language = Language.from_path(Path("src/lib.rs"))
    parser = make_parser(language)
    tree = parser.parse(source)
    lines = classify(language, tree.walk())
"""

__version__ = "0.1.0"

from .core.parsing import (
    Language,
    LineLists,
    LanguageConfig,
    ParserRegistry,
    HighlightConfiguration,
    GrammarError,
    default_registry,
    build_registry,
    identify,
    grammar_of,
    highlight_query_of,
    line_lists_of,
    make_parser,
    make_highlight_config,
    build_highlight_config,
    walk_tree,
    classify,
    significant_lines,
)
from .config import Config, ConfigManager, get_config

__all__ = [
    'Language',
    'LineLists',
    'LanguageConfig',
    'ParserRegistry',
    'HighlightConfiguration',
    'GrammarError',
    'default_registry',
    'build_registry',
    'identify',
    'grammar_of',
    'highlight_query_of',
    'line_lists_of',
    'make_parser',
    'make_highlight_config',
    'build_highlight_config',
    'walk_tree',
    'classify',
    'significant_lines',
    'Config',
    'ConfigManager',
    'get_config',
]
