"""
Grammar provider — Loads grammar handles and query text from grammar packages.

Each LanguageConfig names an importable tree-sitter grammar package
(tree_sitter_rust, tree_sitter_go, ...). The package exposes a function
returning the raw grammar pointer and ships its .scm query files in a
queries/ directory next to its __init__.

Any failure here means the static table does not match the installed
grammar packages, so it is raised as GrammarError rather than reported.
"""

import importlib
import logging
from importlib.resources import files
from typing import Iterable

import tree_sitter

from .config import LanguageConfig
from .errors import GrammarError

logger = logging.getLogger(__name__)


def load_grammar(config: LanguageConfig) -> tree_sitter.Language:
    """
    Load the tree-sitter grammar for a language config.

    Args:
        config: LanguageConfig naming the grammar module and function

    Returns:
        tree_sitter.Language bound to the grammar

    Raises:
        GrammarError: If the module is missing or the grammar ABI is
            incompatible with the installed tree-sitter binding
    """
    try:
        module = importlib.import_module(config.grammar_module)
        language_fn = getattr(module, config.language_func)
    except (ImportError, AttributeError) as err:
        raise GrammarError(
            f"Grammar not available for {config.name}: "
            f"{config.grammar_module}.{config.language_func}",
            config.language,
        ) from err

    try:
        grammar = tree_sitter.Language(language_fn())
    except ValueError as err:
        raise GrammarError(
            f"Incompatible grammar for {config.name}: {err}",
            config.language,
        ) from err

    logger.debug("Loaded %s grammar from %s", config.name, config.grammar_module)
    return grammar


def read_queries(config: LanguageConfig, filenames: Iterable[str]) -> str:
    """
    Read and concatenate query files shipped with a grammar package.

    Args:
        config: LanguageConfig naming the grammar module
        filenames: Query file names under the package's queries/ directory

    Returns:
        Query text, files joined in order (empty for no files)

    Raises:
        GrammarError: If a query file is missing or unreadable
    """
    parts = []
    for filename in filenames:
        try:
            resource = files(config.grammar_module) / "queries" / filename
            parts.append(resource.read_text(encoding="utf-8"))
        except (ImportError, OSError) as err:
            raise GrammarError(
                f"Query file {filename} not found in {config.grammar_module}",
                config.language,
            ) from err
    return "\n".join(parts)
