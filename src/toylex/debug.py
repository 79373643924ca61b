"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from toylex.tokens import LexedToken, TokenKind, token_name


def format_token(tok: LexedToken) -> str:
    loc = f"{tok.location.line}:{tok.location.column}"
    if tok.token == TokenKind.IDENTIFIER:
        return f"{loc:>8}  IDENTIFIER({tok.value!r})"
    if tok.token == TokenKind.NUMBER:
        return f"{loc:>8}  NUMBER({tok.value!r})"
    return f"{loc:>8}  {token_name(tok.token)}"


def dump_tokens(tokens: Iterable[LexedToken], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    for tok in tokens:
        file.write(format_token(tok) + "\n")
