"""Token checks: report the anomalies the lexer accepts silently."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from toylex.tokens import PUNCTUATION, LexedToken, Location, TokenKind, number_prefix_length

# Characters the Toy parser uses as binary operators and separators.
DEFAULT_OPERATORS = "+-*/<>=,"


@dataclass(frozen=True, slots=True)
class Finding:
    """One reported anomaly."""

    code: str
    message: str
    location: Location
    length: int

    def __str__(self) -> str:
        return f"{self.location}: {self.code}: {self.message}"


def check_tokens(
    tokens: Iterable[LexedToken], operators: str = DEFAULT_OPERATORS
) -> list[Finding]:
    """Return a finding for each unrecognized character or malformed number."""
    allowed = PUNCTUATION | frozenset(operators)
    findings: list[Finding] = []
    for tok in tokens:
        if tok.token == TokenKind.NUMBER:
            used = number_prefix_length(tok.text)
            if used != len(tok.text):
                findings.append(
                    Finding(
                        "malformed-number",
                        f"number literal {tok.text!r} is read as {tok.value!r}",
                        tok.location,
                        len(tok.text),
                    )
                )
        elif tok.token >= 0 and tok.text not in allowed:
            findings.append(
                Finding(
                    "unrecognized-character",
                    f"unrecognized character {tok.text!r}",
                    tok.location,
                    1,
                )
            )
    return findings
