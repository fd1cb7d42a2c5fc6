"""
Language configurations for the built-in registry.

Each grammar package gets its own module defining:
- The LanguageConfig row(s) for the tags it serves
- Bespoke classifier lists, where the grammar has them

Supported languages:
- rust.py: Rust (rs)
- go.py: Go (go)
- javascript.py: JavaScript (js), JSX (jsx)
- typescript.py: TypeScript (ts), TSX (tsx)
- python.py: Python (py)
"""

from .rust import RUST_CONFIG
from .go import GO_CONFIG
from .javascript import JAVASCRIPT_CONFIG, JSX_CONFIG
from .typescript import TYPESCRIPT_CONFIG, TSX_CONFIG
from .python import PYTHON_CONFIG

BUILTIN_CONFIGS = [
    RUST_CONFIG,
    GO_CONFIG,
    JAVASCRIPT_CONFIG,
    JSX_CONFIG,
    TYPESCRIPT_CONFIG,
    TSX_CONFIG,
    PYTHON_CONFIG,
]

__all__ = [
    'RUST_CONFIG',
    'GO_CONFIG',
    'JAVASCRIPT_CONFIG',
    'JSX_CONFIG',
    'TYPESCRIPT_CONFIG',
    'TSX_CONFIG',
    'PYTHON_CONFIG',
    'BUILTIN_CONFIGS',
]
