"""Lexical rule table.

A rule pairs a regular expression with the TokenKind it produces. The table
is ordered and the order is significant: when several rules match at the
same position, the one listed first wins. Reserved words therefore come
before the identifier rule, and two-character operators before their
one-character prefixes.

Thread Safety:
LexRule is frozen and DEFAULT_RULES is a tuple. Safe to share.

"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from minilex.errors import RuleError
from minilex.tokens import TokenKind

# Word boundaries and classes are ASCII-only: "ifé" starts with the keyword "if"
RULE_FLAGS = re.ASCII


@dataclass(frozen=True, slots=True)
class LexRule:
    """One (pattern, kind) entry of the rule table.

    Attributes:
        pattern: Regular expression in Python ``re`` syntax
        kind: Token kind produced when this rule wins

    """

    pattern: str
    kind: TokenKind


DEFAULT_RULES: tuple[LexRule, ...] = (
    # Reserved words
    LexRule(r"if\b", TokenKind.CM_IF),
    LexRule(r"else\b", TokenKind.CM_ELSE),
    LexRule(r"while\b", TokenKind.CM_WHILE),
    LexRule(r"var\b", TokenKind.CM_VAR),
    LexRule(r"int\b", TokenKind.TYPE_INT),
    LexRule(r"real\b", TokenKind.TYPE_REAL),
    # Numbers (integer or real; the fraction needs at least one digit)
    LexRule(r"[0-9]+(?:\.[0-9]+)?", TokenKind.NUM),
    # Identifiers
    LexRule(r"[a-zA-Z][a-zA-Z0-9]*", TokenKind.ID),
    # Two-character operators
    LexRule(r">=", TokenKind.OP_GE),
    LexRule(r"<=", TokenKind.OP_LE),
    LexRule(r"==", TokenKind.OP_EQ),
    LexRule(r"!=", TokenKind.OP_NE),
    # One-character operators
    LexRule(r"\+", TokenKind.OP_ADD),
    LexRule(r"-", TokenKind.OP_SUB),
    LexRule(r"\*", TokenKind.OP_MULT),
    LexRule(r"/", TokenKind.OP_DIV),
    LexRule(r"\^", TokenKind.OP_POW),
    LexRule(r"=", TokenKind.CM_ATRIB),
    LexRule(r">", TokenKind.OP_GT),
    LexRule(r"<", TokenKind.OP_LT),
    # Delimiters
    LexRule(r"\(", TokenKind.DELIM_LPAREN),
    LexRule(r"\)", TokenKind.DELIM_RPAREN),
    LexRule(r"\{", TokenKind.DELIM_LBRACE),
    LexRule(r"\}", TokenKind.DELIM_RBRACE),
    LexRule(r";", TokenKind.DELIM_SEMICOLON),
    LexRule(r",", TokenKind.DELIM_COMMA),
    LexRule(r"\.", TokenKind.DELIM_DOT),
)


def build_rules(rules: Iterable[LexRule | tuple[str, TokenKind]] | None = None) -> tuple[LexRule, ...]:
    """Return a validated, ordered rule table.

    With no argument the default table is returned as is. A custom table is
    validated rule by rule, keeping its order.

    Args:
        rules: Optional ordered rules, as LexRule or (pattern, kind) pairs

    Returns:
        Tuple of LexRule in priority order

    Raises:
        RuleError: If the table is empty, a pattern does not compile, a
            pattern can match the empty string, or a rule produces EOF.
    """
    if rules is None:
        return DEFAULT_RULES

    table = tuple(r if isinstance(r, LexRule) else LexRule(*r) for r in rules)
    if not table:
        raise RuleError("rule table is empty")

    for index, rule in enumerate(table):
        validate_rule(rule, index)
    return table


def validate_rule(rule: LexRule, index: int | None = None) -> None:
    """Check that a single rule can be used by the match engine.

    Raises:
        RuleError: On an invalid pattern or kind.
    """
    if not isinstance(rule.kind, TokenKind):
        raise RuleError(f"kind must be a TokenKind, got {rule.kind!r}", index, rule.pattern)
    if rule.kind is TokenKind.EOF:
        raise RuleError("EOF is produced by the scanner, not by rules", index, rule.pattern)
    try:
        compiled = re.compile(rule.pattern, RULE_FLAGS)
    except re.error as e:
        raise RuleError(f"pattern does not compile: {e}", index, rule.pattern) from e
    # An empty match would never advance the cursor
    if compiled.match("") is not None:
        raise RuleError("pattern matches the empty string", index, rule.pattern)
