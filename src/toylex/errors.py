"""Error types for lexer contract violations, with formatted source context."""

from __future__ import annotations

from toylex.tokens import Location, Token, token_name


class LexerContractError(AssertionError):
    """A client of the lexer broke a precondition.

    These are programming errors, not recoverable lexical conditions: the
    lexer itself never raises for odd input.
    """

    def __init__(self, message: str, location: Location) -> None:
        self.message = message
        self.location = location
        super().__init__(self.format())

    def format(self, source: str | None = None) -> str:
        """Render the error, with a caret under the token when source is given."""
        loc = self.location
        line_num = str(loc.line)
        gutter_width = len(line_num) + 1
        result = f"error: {self.message}\n{' ' * gutter_width}--> {loc}"
        if source is None:
            return result

        lines = source.splitlines(keepends=True)
        line_idx = loc.line - 1
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"
        pad = " " * max(0, loc.column - 1)
        return (
            f"{result}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class UnexpectedTokenError(LexerContractError):
    """expect_and_consume() was called with a token other than the current one."""

    def __init__(self, expected: Token, actual: Token, location: Location) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected {token_name(expected)}, found {token_name(actual)}", location
        )


class TokenKindError(LexerContractError):
    """A payload accessor was called while the current token is of another kind."""

    def __init__(self, accessor: str, required: Token, actual: Token, location: Location) -> None:
        self.accessor = accessor
        self.required = required
        self.actual = actual
        super().__init__(
            f"{accessor}() requires the current token to be {token_name(required)}, "
            f"found {token_name(actual)}",
            location,
        )
