"""Test token identities, keywords, and character classification."""

import pytest

from toylex.tokens import (
    KEYWORDS,
    PUNCTUATION,
    Location,
    TokenKind,
    is_alpha,
    is_ident_char,
    is_number_char,
    is_space,
    token_for_char,
    token_name,
)


class TestTokenIdentity:
    @pytest.mark.parametrize("ch", list(";(){}[]"))
    def test_punctuation_equals_code_point(self, ch):
        assert token_for_char(ch) == ord(ch)
        assert isinstance(token_for_char(ch), TokenKind)

    def test_raw_character_is_plain_code(self):
        tok = token_for_char("+")
        assert tok == ord("+")
        assert not isinstance(tok, TokenKind)

    def test_sentinels_are_negative(self):
        for kind in (
            TokenKind.EOF,
            TokenKind.RETURN,
            TokenKind.VAR,
            TokenKind.DEF,
            TokenKind.IDENTIFIER,
            TokenKind.NUMBER,
        ):
            assert kind < 0

    def test_sentinel_values(self):
        assert TokenKind.EOF == -1
        assert TokenKind.RETURN == -2
        assert TokenKind.VAR == -3
        assert TokenKind.DEF == -4
        assert TokenKind.IDENTIFIER == -5
        assert TokenKind.NUMBER == -6

    def test_punctuation_set(self):
        assert PUNCTUATION == frozenset(";(){}[]")


class TestKeywords:
    def test_table(self):
        assert KEYWORDS == {
            "return": TokenKind.RETURN,
            "def": TokenKind.DEF,
            "var": TokenKind.VAR,
        }


class TestTokenName:
    def test_named_kind(self):
        assert token_name(TokenKind.DEF) == "DEF"
        assert token_name(TokenKind.EOF) == "EOF"

    def test_character(self):
        assert token_name(TokenKind.SEMICOLON) == "';'"
        assert token_name(ord("+")) == "'+'"


class TestClassification:
    def test_space(self):
        for ch in " \t\n\v\f\r":
            assert is_space(ch), f"Expected {ch!r} to be space"
        assert not is_space("")
        assert not is_space("a")

    def test_alpha_is_ascii_only(self):
        assert is_alpha("a")
        assert is_alpha("Z")
        assert not is_alpha("é")
        assert not is_alpha("_")
        assert not is_alpha("1")
        assert not is_alpha("")

    def test_ident_char(self):
        for ch in "aZ09_":
            assert is_ident_char(ch), f"Expected {ch!r} to be ident_char"
        for ch in ".-#( ":
            assert not is_ident_char(ch), f"Expected {ch!r} to NOT be ident_char"
        assert not is_ident_char("")

    def test_number_char(self):
        assert is_number_char("0")
        assert is_number_char(".")
        assert not is_number_char("e")
        assert not is_number_char("")


class TestLocation:
    def test_str(self):
        assert str(Location("main.toy", 3, 7)) == "main.toy:3:7"

    def test_frozen(self):
        loc = Location("main.toy", 1, 1)
        with pytest.raises(AttributeError):
            loc.line = 2
