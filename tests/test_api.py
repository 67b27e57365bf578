"""Tests for the top-level package API."""

import minilex
from minilex import Scanner, Token, TokenKind, format_token, tokenize


class TestTokenizeFunction:
    def test_ends_with_eof(self) -> None:
        tokens = tokenize("x = 1")
        assert tokens == [
            Token(TokenKind.ID, "x"),
            Token(TokenKind.CM_ATRIB, "="),
            Token(TokenKind.NUM, "1"),
            Token(TokenKind.EOF, ""),
        ]

    def test_source_file_propagates(self) -> None:
        tokens = tokenize("a", source_file="prog.txt")
        assert all(t.location.source_file == "prog.txt" for t in tokens)

    def test_config_argument(self) -> None:
        tokens = tokenize("a ?", config=minilex.ScanConfig(skip_policy="whitespace"))
        assert [t.type for t in tokens] == [TokenKind.ID, TokenKind.ERROR, TokenKind.EOF]

    def test_matches_scanner(self) -> None:
        source = "while (i != 0) { i = i - 1; }"
        assert tokenize(source) == list(Scanner(source).tokenize())


class TestPublicSurface:
    def test_version(self) -> None:
        assert isinstance(minilex.__version__, str)

    def test_all_exports_resolve(self) -> None:
        for name in minilex.__all__:
            assert hasattr(minilex, name), name

    def test_listing_round(self) -> None:
        listing = [format_token(t) for t in Scanner("int n;")]
        assert listing == ["'int' -> TYPE_INT", "'n' -> ID", "';' -> DELIM"]


class TestLogger:
    def test_prefix_added(self) -> None:
        from minilex.utils.logger import get_logger

        assert get_logger("mymodule").name == "minilex.mymodule"
        assert get_logger("minilex.lexer.core").name == "minilex.lexer.core"
        assert get_logger("minilex").name == "minilex"

    def test_error_tokens_are_logged(self, caplog) -> None:
        import logging

        with caplog.at_level(logging.DEBUG, logger="minilex"):
            tokenize("a ?", config=minilex.ScanConfig(skip_policy="whitespace"))
        assert "Unrecognized input '?' at 1:3" in caplog.text
