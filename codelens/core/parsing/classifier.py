"""
Line Classifier — Finds the structurally significant lines of a syntax tree.

Walks the tree depth-first from the cursor's node. Every visited node
whose kind is not in the ignore list marks its start and end rows; only
nodes whose kind is in the expand list have their children visited.
Nodes outside the expand list are seen at their root only, so lines
inside e.g. a function body never enter the result.

Works with tree_sitter.TreeCursor or any cursor exposing `node`
(with `type`, `start_point`, `end_point`) and goto_first_child,
goto_next_sibling, goto_parent.

Usage:
    tree = make_parser(Language.RUST).parse(source)
    lines = classify(Language.RUST, tree.walk())
"""

import logging
from typing import Optional, Set, Union, TYPE_CHECKING

from .config import LineLists
from .language import Language
from .registry import ParserRegistry, default_registry

if TYPE_CHECKING:
    from tree_sitter import TreeCursor

logger = logging.getLogger(__name__)


def walk_tree(cursor: 'TreeCursor', lines: Set[int], line_lists: LineLists) -> None:
    """
    Add the significant lines under the cursor's node to `lines`.

    Iterative pre-order walk; the cursor is back on its starting node
    when this returns.

    Args:
        cursor: Cursor positioned on the subtree root
        lines: Set to add 0-based rows to
        line_lists: Expand and ignore lists for the tree's language
    """
    expand = line_lists.expand
    ignore = line_lists.ignore
    depth = 0

    while True:
        node = cursor.node
        kind = node.type.strip()
        if kind and kind not in ignore:
            lines.add(node.start_point[0])
            lines.add(node.end_point[0])

        if kind in expand and cursor.goto_first_child():
            depth += 1
            continue

        # Never step to a sibling of the starting node.
        while depth > 0 and not cursor.goto_next_sibling():
            cursor.goto_parent()
            depth -= 1
        if depth == 0:
            return


def classify(
    language: Language,
    cursor: 'TreeCursor',
    registry: Optional[ParserRegistry] = None,
) -> Set[int]:
    """
    Compute the significant lines of a tree for a language.

    Args:
        language: Language the tree was parsed as
        cursor: Cursor on the tree root (left there on return)
        registry: Registry supplying the line lists (default registry if None)

    Returns:
        Set of 0-based line numbers
    """
    registry = registry or default_registry()
    line_lists = registry.line_lists_of(language)

    lines: Set[int] = set()
    walk_tree(cursor, lines, line_lists)

    logger.debug("Classified %d significant lines for %s", len(lines), language.value)
    return lines


def significant_lines(
    language: Language,
    source: Union[str, bytes],
    registry: Optional[ParserRegistry] = None,
) -> Set[int]:
    """
    Parse source text and classify the resulting tree.

    Args:
        language: Language to parse the source as
        source: Source text (str is encoded as UTF-8)
        registry: Registry to use (default registry if None)

    Returns:
        Set of 0-based line numbers
    """
    from .factory import make_parser

    if isinstance(source, str):
        source = source.encode('utf-8')

    parser = make_parser(language, registry)
    tree = parser.parse(source)
    return classify(language, tree.walk(), registry)
