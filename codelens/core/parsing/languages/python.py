"""Python language configuration (default classifier lists)."""

from ..config import LanguageConfig
from ..language import Language


PYTHON_CONFIG = LanguageConfig(
    language=Language.PYTHON,
    name="Python",
    extensions={'py'},
    grammar_module="tree_sitter_python",
)
