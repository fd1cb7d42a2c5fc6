"""
Parser Registry — The static language table.

Maps file extensions to Language tags and Language tags to their
LanguageConfig row. Grammar handles and query text are loaded from the
grammar packages on first use and cached for the registry's lifetime.

Usage:
    registry = default_registry()

    language = registry.identify(Path("src/app.tsx"))   # Language.TSX
    grammar = registry.grammar_of(language)
    query = registry.highlight_query_of(language)
    lists = registry.line_lists_of(language)
"""

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Set, Union, TYPE_CHECKING

from .config import LanguageConfig, LineLists
from .language import Language

if TYPE_CHECKING:
    import tree_sitter
    from ...config import Config

logger = logging.getLogger(__name__)


def _normalize_extension(ext: str) -> str:
    return ext[1:] if ext.startswith('.') else ext


class ParserRegistry:
    """
    Registry of language configurations.

    Maps extensions to Language tags for identification and provides
    the per-language lookups (grammar, highlight query, line lists).
    Registered configs are never mutated; the grammar and query caches
    are the only state that changes after registration.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._configs: Dict[Language, LanguageConfig] = {}
        self._extension_map: Dict[str, Language] = {}  # ext -> language
        self._grammars: Dict[Language, 'tree_sitter.Language'] = {}
        self._queries: Dict[Language, str] = {}
        self._lock = threading.Lock()

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, config: LanguageConfig) -> None:
        """
        Register a language configuration.

        Args:
            config: LanguageConfig to register

        Raises:
            ValueError: If extension already registered to different language
        """
        for ext in config.extensions:
            existing = self._extension_map.get(_normalize_extension(ext))
            if existing is not None and existing != config.language:
                raise ValueError(
                    f"Extension {ext} already registered to {existing.value}, "
                    f"cannot register to {config.language.value}"
                )

        self._configs[config.language] = config
        for ext in config.extensions:
            self._extension_map[_normalize_extension(ext)] = config.language

    def unregister(self, language: Language) -> bool:
        """
        Unregister a language and every extension routed to it.

        Args:
            language: Language to unregister

        Returns:
            True if unregistered, False if not found
        """
        if language not in self._configs:
            return False

        for ext in [e for e, lang in self._extension_map.items() if lang == language]:
            del self._extension_map[ext]

        del self._configs[language]
        self._grammars.pop(language, None)
        self._queries.pop(language, None)
        return True

    def alias_extension(self, ext: str, language: Language) -> None:
        """
        Route an additional extension to a registered language.

        Args:
            ext: Extension with or without leading dot (e.g., "pyi")
            language: Registered language to route it to

        Raises:
            ValueError: If the language is not registered or the extension
                already belongs to another language
        """
        self.get_config_for(language)
        ext = _normalize_extension(ext)
        existing = self._extension_map.get(ext)
        if existing is not None and existing != language:
            raise ValueError(
                f"Extension {ext} already registered to {existing.value}, "
                f"cannot alias to {language.value}"
            )
        self._extension_map[ext] = language

    # =========================================================================
    # Identification
    # =========================================================================

    def identify(self, file_path: Union[str, Path]) -> Optional[Language]:
        """
        Identify a file's language from its extension.

        Pure lookup on the final suffix; the file is never opened.

        Args:
            file_path: Path to file

        Returns:
            Language if the extension is supported, None otherwise
        """
        suffix = Path(file_path).suffix
        if not suffix:
            return None
        return self._extension_map.get(suffix[1:])

    def get_config(self, file_path: Union[str, Path]) -> Optional[LanguageConfig]:
        """
        Get language config for a file based on extension.

        Returns:
            LanguageConfig if extension is supported, None otherwise
        """
        language = self.identify(file_path)
        return self._configs.get(language) if language else None

    def get_config_for(self, language: Language) -> LanguageConfig:
        """
        Get the config row for a language.

        Raises:
            ValueError: If the language is not registered
        """
        config = self._configs.get(language)
        if config is None:
            raise ValueError(f"No configuration registered for {language}")
        return config

    # =========================================================================
    # Per-language lookups
    # =========================================================================

    def grammar_of(self, language: Language) -> 'tree_sitter.Language':
        """
        Get the tree-sitter grammar for a language (loaded once).

        Raises:
            ValueError: If the language is not registered
            GrammarError: If the grammar package is missing or incompatible
        """
        config = self.get_config_for(language)
        with self._lock:
            grammar = self._grammars.get(language)
            if grammar is None:
                from .grammar import load_grammar
                grammar = load_grammar(config)
                self._grammars[language] = grammar
        return grammar

    def highlight_query_of(self, language: Language) -> str:
        """
        Get the highlight query text for a language (read once).

        Raises:
            ValueError: If the language is not registered
            GrammarError: If a query file is missing
        """
        config = self.get_config_for(language)
        with self._lock:
            query = self._queries.get(language)
            if query is None:
                from .grammar import read_queries
                query = read_queries(config, config.highlight_queries)
                self._queries[language] = query
        return query

    def injection_query_of(self, language: Language) -> str:
        """Get the injection query text for a language (empty if none)."""
        from .grammar import read_queries
        config = self.get_config_for(language)
        return read_queries(config, config.injection_queries)

    def locals_query_of(self, language: Language) -> str:
        """Get the locals query text for a language (empty if none)."""
        from .grammar import read_queries
        config = self.get_config_for(language)
        return read_queries(config, config.locals_queries)

    def line_lists_of(self, language: Language) -> LineLists:
        """
        Get the classifier lists for a language.

        Returns:
            Bespoke LineLists, or the default pair when none are defined
        """
        return self.get_config_for(language).effective_line_lists

    # =========================================================================
    # Introspection
    # =========================================================================

    def supported_extensions(self) -> Set[str]:
        """
        Get all supported file extensions.

        Returns:
            Set of extensions without dot (e.g., {'rs', 'go', 'tsx'})
        """
        return set(self._extension_map.keys())

    def supported_languages(self) -> List[Language]:
        """Get registered languages in registration order."""
        return list(self._configs.keys())

    def is_supported(self, file_path: Union[str, Path]) -> bool:
        """Check if a file type is supported."""
        return self.identify(file_path) is not None

    def __len__(self) -> int:
        """Return number of registered languages."""
        return len(self._configs)

    def __contains__(self, language: Language) -> bool:
        """Check if a language is registered."""
        return language in self._configs


# =============================================================================
# Built-in registry
# =============================================================================

_default_registry: Optional[ParserRegistry] = None
_default_lock = threading.Lock()


def _builtin_registry() -> ParserRegistry:
    from .languages import BUILTIN_CONFIGS

    registry = ParserRegistry()
    for config in BUILTIN_CONFIGS:
        registry.register(config)
    return registry


def default_registry() -> ParserRegistry:
    """Get the process-wide registry holding every built-in language."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = _builtin_registry()
    return _default_registry


def build_registry(config: Optional['Config'] = None) -> ParserRegistry:
    """
    Build a fresh registry with configured extension aliases applied.

    Args:
        config: Loaded Config (defaults to get_config())

    Returns:
        ParserRegistry with built-in languages plus aliases

    Raises:
        ValueError: If an alias collides with a built-in extension
    """
    if config is None:
        from ...config import get_config
        config = get_config()

    registry = _builtin_registry()
    for ext, name in config.languages.extensions.items():
        language = Language.from_name(name)
        if language is None:
            logger.warning("Ignoring alias %s: unknown language %r", ext, name)
            continue
        registry.alias_extension(ext, language)
    return registry


def identify(file_path: Union[str, Path]) -> Optional[Language]:
    """Identify a file's language with the default registry."""
    return default_registry().identify(file_path)


def grammar_of(language: Language) -> 'tree_sitter.Language':
    """Grammar for a language from the default registry."""
    return default_registry().grammar_of(language)


def highlight_query_of(language: Language) -> str:
    """Highlight query text for a language from the default registry."""
    return default_registry().highlight_query_of(language)


def line_lists_of(language: Language) -> LineLists:
    """Classifier lists for a language from the default registry."""
    return default_registry().line_lists_of(language)
