"""Toy language lexer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toylex.tokens import LexedToken

__version__ = "0.1.0"


def tokenize(source: str, filename: str = "<input>") -> list[LexedToken]:
    """Tokenize Toy source text into a list ending with one EOF token."""
    from toylex.lexer import tokenize as _tokenize

    return _tokenize(source, filename)
