"""Combined-pattern match engine.

All rules are joined into one regular expression, one named group per rule,
in table order. Python's ``re`` tries alternatives left to right and stops
at the first one that matches, so at any position the winning rule is the
earliest one in the table that matches there. This is order-priority
matching, not longest match: ``if\\b`` beats the identifier rule on "if"
because it is listed first.

Searching (rather than anchoring) at the cursor makes the engine step over
characters that no rule matches, which is how whitespace is skipped.

Thread Safety:
MatchEngine is immutable after construction and holds no cursor state.
One instance can serve any number of scanners and threads.

"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from minilex.errors import RuleError
from minilex.rules import RULE_FLAGS, LexRule, build_rules
from minilex.tokens import TokenKind

_GROUP_PREFIX = "_r"


@dataclass(frozen=True, slots=True)
class EngineMatch:
    """Result of a single engine lookup.

    Attributes:
        rule_index: Position in the rule table of the winning rule, or -1 if
            the winning group could not be identified
        start: Offset where the match begins
        end: Offset just past the match
        text: The matched lexeme

    """

    rule_index: int
    start: int
    end: int
    text: str


def _group_name(index: int) -> str:
    return f"{_GROUP_PREFIX}{index}"


def _rule_index(group_name: str | None) -> int:
    if group_name is None or not group_name.startswith(_GROUP_PREFIX):
        return -1
    try:
        return int(group_name[len(_GROUP_PREFIX) :])
    except ValueError:
        return -1


class MatchEngine:
    """Matcher over an ordered rule table.

    Usage:
            >>> engine = MatchEngine()
            >>> m = engine.match_at("  while x", 0)
            >>> (engine.kind_for(m.rule_index), m.text, m.start)
            (<TokenKind.CM_WHILE: 6>, 'while', 2)

    """

    __slots__ = ("_rules", "_pattern", "_rule_patterns")

    def __init__(self, rules: Iterable[LexRule | tuple[str, TokenKind]] | None = None) -> None:
        """Compile the combined pattern.

        Args:
            rules: Ordered rule table (defaults to DEFAULT_RULES)

        Raises:
            RuleError: If the table is invalid or the combined pattern does
                not compile (e.g. a rule reuses an internal group name).
        """
        self._rules = build_rules(rules)
        combined = "|".join(
            f"(?P<{_group_name(i)}>{rule.pattern})" for i, rule in enumerate(self._rules)
        )
        try:
            self._pattern = re.compile(combined, RULE_FLAGS)
        except re.error as e:
            raise RuleError(f"combined pattern does not compile: {e}") from e
        # Per-rule patterns resolve positions where the alternation stops at
        # an empty match
        self._rule_patterns = tuple(re.compile(rule.pattern, RULE_FLAGS) for rule in self._rules)

    @property
    def rules(self) -> tuple[LexRule, ...]:
        return self._rules

    @property
    def pattern(self) -> re.Pattern[str]:
        """The compiled alternation (for diagnostics)."""
        return self._pattern

    def __len__(self) -> int:
        return len(self._rules)

    def match_at(self, source: str, pos: int) -> EngineMatch | None:
        """Find the next match at or after ``pos``.

        Characters before the match that no rule matches are skipped.
        When the alternation stops at an empty match (possible with
        lookaround-only custom rules), the rules are tried one by one at that
        position and the first non-empty match wins; the position is skipped
        only if none matches. The result always consumes at least one
        character.

        Args:
            source: Source buffer
            pos: Offset to start searching from

        Returns:
            The winning match, or None if nothing in ``source[pos:]`` matches.
        """
        source_len = len(source)
        while pos <= source_len:
            m = self._pattern.search(source, pos)
            if m is None:
                return None
            if m.end() > m.start():
                return EngineMatch(
                    rule_index=_rule_index(m.lastgroup),
                    start=m.start(),
                    end=m.end(),
                    text=m.group(),
                )
            start = m.start()
            for index, rule_pattern in enumerate(self._rule_patterns):
                rm = rule_pattern.match(source, start)
                if rm is not None and rm.end() > start:
                    return EngineMatch(rule_index=index, start=start, end=rm.end(), text=rm.group())
            pos = start + 1
        return None

    def kind_for(self, rule_index: int) -> TokenKind | None:
        """Token kind of a rule, or None if the index is out of range."""
        if 0 <= rule_index < len(self._rules):
            return self._rules[rule_index].kind
        return None


DEFAULT_ENGINE = MatchEngine()
