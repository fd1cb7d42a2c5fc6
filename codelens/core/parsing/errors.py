"""Errors raised when the static language table is internally inconsistent."""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .language import Language


class GrammarError(RuntimeError):
    """
    A grammar, query or parser binding could not be built.

    Raised for build-time data errors (incompatible grammar ABI, missing
    or malformed query text). Callers are not expected to recover.
    """

    def __init__(self, message: str, language: Optional['Language'] = None):
        super().__init__(message)
        self.language = language
