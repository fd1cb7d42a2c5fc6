"""
Factories — Parsers and highlight configurations per language.

Both factories build fresh objects on every call; grammar handles and
query text come from the registry cache. A failure means the static
language table is inconsistent with the installed grammar packages and
is raised as GrammarError, never returned as a partial object.

Usage:
    parser = make_parser(Language.RUST)
    tree = parser.parse(b"fn main() {}")

    highlight = make_highlight_config(Language.GO)
    highlight = build_highlight_config(Language.GO)  # names from config
"""

import logging
from typing import Optional, Sequence, TYPE_CHECKING

import tree_sitter

from .errors import GrammarError
from .highlight import HighlightConfiguration
from .language import Language
from .registry import ParserRegistry, default_registry

if TYPE_CHECKING:
    from ...config import Config

logger = logging.getLogger(__name__)


def make_parser(
    language: Language,
    registry: Optional[ParserRegistry] = None,
) -> tree_sitter.Parser:
    """
    Create a parser bound to a language's grammar.

    Args:
        language: Language to parse
        registry: Registry to look the grammar up in (default registry if None)

    Returns:
        Ready-to-use tree_sitter.Parser

    Raises:
        GrammarError: If the grammar cannot be bound to a parser
    """
    registry = registry or default_registry()
    grammar = registry.grammar_of(language)
    try:
        parser = tree_sitter.Parser(grammar)
    except ValueError as err:
        raise GrammarError(
            f"Cannot bind {language.value} grammar to parser: {err}", language
        ) from err

    logger.debug("Created %s parser", language.value)
    return parser


def make_highlight_config(
    language: Language,
    registry: Optional[ParserRegistry] = None,
    recognized_names: Optional[Sequence[str]] = None,
) -> HighlightConfiguration:
    """
    Build the highlight configuration for a language.

    Args:
        language: Language to highlight
        registry: Registry to look grammar and queries up in
        recognized_names: If given, configure() is applied with these names

    Returns:
        HighlightConfiguration with the compiled query

    Raises:
        GrammarError: If the query text is missing or does not compile
    """
    registry = registry or default_registry()
    grammar = registry.grammar_of(language)
    highlights = registry.highlight_query_of(language)
    injections = registry.injection_query_of(language)
    locals_query = registry.locals_query_of(language)

    try:
        config = HighlightConfiguration(grammar, highlights, injections, locals_query)
    except Exception as err:
        raise GrammarError(
            f"Invalid highlight query for {language.value}: {err}", language
        ) from err

    if recognized_names is not None:
        config.configure(recognized_names)

    logger.debug(
        "Created %s highlight config with %d captures",
        language.value, len(config.capture_names),
    )
    return config


def build_highlight_config(
    language: Language,
    config: Optional['Config'] = None,
    registry: Optional[ParserRegistry] = None,
) -> HighlightConfiguration:
    """
    Build a highlight configuration configured with the loaded highlight names.

    Args:
        language: Language to highlight
        config: Loaded Config (defaults to get_config())
        registry: Registry to look grammar and queries up in

    Returns:
        HighlightConfiguration with config.highlight.names applied

    Raises:
        GrammarError: If the query text is missing or does not compile
    """
    if config is None:
        from ...config import get_config
        config = get_config()

    return make_highlight_config(
        language, registry, recognized_names=config.highlight.names
    )
