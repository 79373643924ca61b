"""Token values, locations, and character classification helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum


class TokenKind(IntEnum):
    # Punctuation (value is the character's own code point)
    SEMICOLON = ord(";")
    PAREN_OPEN = ord("(")
    PAREN_CLOSE = ord(")")
    BRACE_OPEN = ord("{")
    BRACE_CLOSE = ord("}")
    BRACKET_OPEN = ord("[")
    BRACKET_CLOSE = ord("]")

    EOF = -1

    # Commands
    RETURN = -2
    VAR = -3
    DEF = -4

    # Primary
    IDENTIFIER = -5
    NUMBER = -6


# A token is a TokenKind member or the code point of a raw character.
Token = int

KEYWORDS: dict[str, TokenKind] = {
    "return": TokenKind.RETURN,
    "def": TokenKind.DEF,
    "var": TokenKind.VAR,
}

PUNCTUATION = frozenset(chr(k) for k in TokenKind if k >= 0)


@dataclass(frozen=True, slots=True)
class Location:
    """Where a token begins: 1-based line and column."""

    file: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class LexedToken:
    """A token together with its lexeme, decoded payload, and start location."""

    token: Token
    text: str
    value: str | float | None
    location: Location


def token_for_char(ch: str) -> Token:
    """Return the token for a single raw character."""
    code = ord(ch)
    try:
        return TokenKind(code)
    except ValueError:
        return code


def token_name(tok: Token) -> str:
    """Human-readable name: the member name, or the quoted character."""
    if tok < 0:
        return TokenKind(tok).name
    return repr(chr(tok))


# ASCII-only, like the C <ctype.h> predicates in the "C" locale. The empty
# string (end of input) is never a member.
_SPACE = frozenset(" \t\n\v\f\r")
_ALPHA = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGIT = frozenset("0123456789")
_IDENT = _ALPHA | _DIGIT | {"_"}


def is_space(ch: str) -> bool:
    return ch in _SPACE


def is_alpha(ch: str) -> bool:
    return ch in _ALPHA


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return ch in _IDENT


def is_number_char(ch: str) -> bool:
    """Return True if ch may start or continue a number."""
    return ch in _DIGIT or ch == "."


_DECIMAL_PREFIX = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")


def parse_number(text: str) -> float:
    """Decode the longest leading decimal in text, or 0.0 if there is none.

    Never raises: "1.2.3" gives 1.2 and "." gives 0.0.
    """
    match = _DECIMAL_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group())


def number_prefix_length(text: str) -> int:
    """Length of the part of text that parse_number actually decodes."""
    match = _DECIMAL_PREFIX.match(text)
    return 0 if match is None else match.end()
