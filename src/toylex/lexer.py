"""Toy lexer: a pull-based token stream over a line provider."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from toylex.errors import TokenKindError, UnexpectedTokenError
from toylex.source import BufferLineProvider, LineProvider
from toylex.tokens import (
    KEYWORDS,
    LexedToken,
    Location,
    Token,
    TokenKind,
    is_alpha,
    is_ident_char,
    is_number_char,
    is_space,
    parse_number,
    token_for_char,
)

logger = logging.getLogger(__name__)

# Character returned by the cursor once the provider is exhausted.
EOF_CHAR = ""


class Lexer:
    """Cursor over the tokens of one source unit.

    Nothing is read until the first advance(); until then the current token
    is TokenKind.EOF.
    """

    def __init__(self, provider: LineProvider, filename: str = "<input>") -> None:
        self._provider = provider
        self._filename = filename
        self._cur_tok: Token = TokenKind.EOF
        self._location = Location(filename, 0, 0)
        self._identifier = ""
        self._number = 0.0
        self._lexeme = ""
        self._last_char = " "
        self._line = 0
        self._col = 0
        # Primed with a newline so the first real character lands on line 1.
        self._line_buffer = "\n"
        self._line_pos = 0

    @classmethod
    def from_string(
        cls, source: str, filename: str = "<input>", start: int = 0, end: int | None = None
    ) -> Lexer:
        """Build a lexer over source[start:end]."""
        return cls(BufferLineProvider(source, start, end), filename)

    # ------------------------------------------------------------------
    # Token stream
    # ------------------------------------------------------------------

    def current_token(self) -> Token:
        return self._cur_tok

    def advance(self) -> Token:
        """Scan the next token and make it current."""
        self._cur_tok = self._scan_token()
        return self._cur_tok

    def expect_and_consume(self, expected: Token) -> None:
        """Advance past the current token, which must be `expected`."""
        if self._cur_tok != expected:
            raise UnexpectedTokenError(expected, self._cur_tok, self._location)
        self.advance()

    def consume_if(self, expected: Token) -> bool:
        """Advance and return True if the current token is `expected`."""
        if self._cur_tok != expected:
            return False
        self.advance()
        return True

    def identifier_text(self) -> str:
        if self._cur_tok != TokenKind.IDENTIFIER:
            raise TokenKindError(
                "identifier_text", TokenKind.IDENTIFIER, self._cur_tok, self._location
            )
        return self._identifier

    def number_value(self) -> float:
        if self._cur_tok != TokenKind.NUMBER:
            raise TokenKindError("number_value", TokenKind.NUMBER, self._cur_tok, self._location)
        return self._number

    def identifier_text_or_none(self) -> str | None:
        if self._cur_tok != TokenKind.IDENTIFIER:
            return None
        return self._identifier

    def number_value_or_none(self) -> float | None:
        if self._cur_tok != TokenKind.NUMBER:
            return None
        return self._number

    def lexeme(self) -> str:
        """Source text of the current token ("" at end of input)."""
        return self._lexeme

    def current_location(self) -> Location:
        """Where the current token began (not the cursor's live position)."""
        return self._location

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def line(self) -> int:
        """Live line of the character cursor."""
        return self._line

    @property
    def column(self) -> int:
        """Live column of the character cursor."""
        return self._col

    # ------------------------------------------------------------------
    # Character cursor
    # ------------------------------------------------------------------

    def _next_char(self) -> str:
        if self._line_pos >= len(self._line_buffer):
            return EOF_CHAR
        self._col += 1
        ch = self._line_buffer[self._line_pos]
        self._line_pos += 1
        if self._line_pos >= len(self._line_buffer):
            self._line_buffer = self._provider.next_line()
            self._line_pos = 0
            if self._line_buffer:
                logger.debug("%s: fetched line %d", self._filename, self._line + 1)
            else:
                logger.debug("%s: end of input after line %d", self._filename, self._line)
        if ch == "\n":
            self._line += 1
            self._col = 0
        return ch

    # ------------------------------------------------------------------
    # Scanner
    # ------------------------------------------------------------------

    def _scan_token(self) -> Token:
        while True:
            while is_space(self._last_char):
                self._last_char = self._next_char()

            self._location = Location(self._filename, self._line, self._col)

            # Identifier: [a-zA-Z][a-zA-Z0-9_]*
            if is_alpha(self._last_char):
                chars = [self._last_char]
                self._last_char = self._next_char()
                while is_ident_char(self._last_char):
                    chars.append(self._last_char)
                    self._last_char = self._next_char()
                self._identifier = self._lexeme = "".join(chars)
                return KEYWORDS.get(self._identifier, TokenKind.IDENTIFIER)

            # Number: [0-9.]+
            if is_number_char(self._last_char):
                chars = []
                while is_number_char(self._last_char):
                    chars.append(self._last_char)
                    self._last_char = self._next_char()
                self._lexeme = "".join(chars)
                self._number = parse_number(self._lexeme)
                return TokenKind.NUMBER

            if self._last_char == "#":
                # Comment until end of line; the terminator is left for the
                # whitespace skip.
                self._last_char = self._next_char()
                while self._last_char not in (EOF_CHAR, "\n", "\r"):
                    self._last_char = self._next_char()
                if self._last_char != EOF_CHAR:
                    continue

            # End of input is never consumed, so this repeats.
            if self._last_char == EOF_CHAR:
                self._lexeme = ""
                return TokenKind.EOF

            this_char = self._last_char
            self._last_char = self._next_char()
            self._lexeme = this_char
            return token_for_char(this_char)


def iter_tokens(lexer: Lexer) -> Iterator[LexedToken]:
    """Advance `lexer` to the end, yielding every token including the final EOF."""
    while True:
        tok = lexer.advance()
        if tok == TokenKind.IDENTIFIER:
            value: str | float | None = lexer.identifier_text()
        elif tok == TokenKind.NUMBER:
            value = lexer.number_value()
        else:
            value = None
        yield LexedToken(tok, lexer.lexeme(), value, lexer.current_location())
        if tok == TokenKind.EOF:
            return


def tokenize(source: str, filename: str = "<input>") -> list[LexedToken]:
    """Convenience function: tokenize source text and return the token list."""
    return list(iter_tokens(Lexer.from_string(source, filename)))
