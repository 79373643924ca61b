"""Test the --debug token dump."""

import io

from toylex.debug import dump_tokens, format_token
from toylex.lexer import tokenize


class TestFormatToken:
    def test_identifier(self):
        tok = tokenize("foo")[0]
        assert format_token(tok) == "     1:1  IDENTIFIER('foo')"

    def test_number(self):
        tok = tokenize("  2.5")[0]
        assert format_token(tok) == "     1:3  NUMBER(2.5)"

    def test_keyword_and_char(self):
        tokens = tokenize("return;")
        assert format_token(tokens[0]).endswith("RETURN")
        assert format_token(tokens[1]).endswith("';'")


class TestDumpTokens:
    def test_one_line_per_token(self):
        out = io.StringIO()
        dump_tokens(tokenize("var x;"), file=out)
        lines = out.getvalue().splitlines()
        assert len(lines) == 4
        assert lines[-1].endswith("EOF")
