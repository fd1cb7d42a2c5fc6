"""
Parsing module — Language registry, parser factories and line classification.

This module provides:
- Language: Closed set of supported language tags
- LanguageConfig / LineLists: Per-language table rows
- ParserRegistry: Extension routing and per-language lookups
- make_parser / make_highlight_config: tree-sitter object factories
- classify: Significant-line computation over a syntax tree

Usage:
    from codelens.core.parsing import identify, make_parser, classify

    language = identify(Path("main.go"))
    if language is not None:
        tree = make_parser(language).parse(source)
        lines = classify(language, tree.walk())
"""

from .language import Language
from .config import (
    LineLists,
    LanguageConfig,
    DEFAULT_LINE_LISTS,
    DEFAULT_CODE_LENS_LIST,
    DEFAULT_CODE_LENS_IGNORE_LIST,
)
from .errors import GrammarError
from .registry import (
    ParserRegistry,
    default_registry,
    build_registry,
    identify,
    grammar_of,
    highlight_query_of,
    line_lists_of,
)
from .highlight import HighlightConfiguration, DEFAULT_HIGHLIGHT_NAMES
from .factory import make_parser, make_highlight_config, build_highlight_config
from .classifier import walk_tree, classify, significant_lines

__all__ = [
    'Language',
    'LineLists',
    'LanguageConfig',
    'DEFAULT_LINE_LISTS',
    'DEFAULT_CODE_LENS_LIST',
    'DEFAULT_CODE_LENS_IGNORE_LIST',
    'GrammarError',
    'ParserRegistry',
    'default_registry',
    'build_registry',
    'identify',
    'grammar_of',
    'highlight_query_of',
    'line_lists_of',
    'HighlightConfiguration',
    'DEFAULT_HIGHLIGHT_NAMES',
    'make_parser',
    'make_highlight_config',
    'build_highlight_config',
    'walk_tree',
    'classify',
    'significant_lines',
]
