"""
minilex — lexical scanner for a small imperative language

Turns source text using ``var``, ``if``, ``else``, ``while``, ``int``,
``real``, identifiers, numbers, operators and delimiters into a stream of
classified tokens. Zero runtime dependencies.

Quick Start:
    >>> from minilex import tokenize, format_token
    >>> for token in tokenize("var x = 10;")[:-1]:
    ...     print(format_token(token))
    'var' -> CM_VAR
    'x' -> ID
    '=' -> CM_ATRIB
    '10' -> NUM
    ';' -> DELIM

    >>> # Pull interface
    >>> from minilex import Scanner
    >>> scanner = Scanner("a >= b")
    >>> scanner.next_token().value
    'a'
"""

from minilex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from minilex.errors import ConfigError, MinilexError, RuleError, ScanError
from minilex.lexer import MatchEngine, Scanner
from minilex.location import SourceLocation
from minilex.rules import DEFAULT_RULES, LexRule, build_rules
from minilex.tokens import Token, TokenKind, format_token, token_name

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Scan a complete source string.

    Args:
        source: Source text
        source_file: Optional source file path for token locations
        config: Scan configuration (defaults to the context config)

    Returns:
        All tokens in order, ending with one EOF token
    """
    return list(Scanner(source, source_file, config=config).tokenize())


__all__ = [
    "DEFAULT_RULES",
    "ConfigError",
    "LexRule",
    "MatchEngine",
    "MinilexError",
    "RuleError",
    "ScanConfig",
    "ScanError",
    "Scanner",
    "SourceLocation",
    "Token",
    "TokenKind",
    "__version__",
    "build_rules",
    "format_token",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "token_name",
    "tokenize",
]
