"""Pull-based scanner over an in-memory source buffer.

The scanner owns a cursor that only moves forward. Each call to
``next_token()`` asks the match engine for the next match at or after the
cursor, emits it, and commits the cursor past it. No rewinds, so any finite
input terminates in at most ``len(source)`` non-EOF tokens.

Thread Safety:
Scanner instances are single-use and stateful. Create one per source string
and do not share it between threads. The match engine they use is immutable
and shared freely.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from minilex.config import ScanConfig, get_scan_config
from minilex.lexer.engine import DEFAULT_ENGINE, MatchEngine
from minilex.rules import LexRule
from minilex.tokens import Token, TokenKind
from minilex.utils.logger import get_logger

logger = get_logger(__name__)

# A run of characters that may not be skipped under the "whitespace" policy
_UNMATCHED_RUN = re.compile(r"\S+")


class Scanner:
    """Order-priority scanner for the language.

    Usage:
            >>> scanner = Scanner("x = 1")
            >>> scanner.next_token()
            Token(ID, 'x', 1:1)
            >>> [t.value for t in scanner]
            ['=', '1']
            >>> scanner.next_token()
            Token(EOF, '', 1:6)

    Errors:
        Malformed input never raises. Unrecognized text (under the
        "whitespace" skip policy) and unidentifiable engine matches come
        back as ERROR tokens and scanning continues.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_engine",
        "_config",
        "_done",  # EOF reached; every later call returns EOF
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        rules: Iterable[LexRule | tuple[str, TokenKind]] | None = None,
        engine: MatchEngine | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Complete source text
            source_file: Optional source file path for token locations
            rules: Optional custom rule table (compiled into a new engine)
            engine: Optional pre-built engine, for reuse across scanners
            config: Scan configuration (defaults to the context config)

        Raises:
            ValueError: If both ``rules`` and ``engine`` are given.
            RuleError: If ``rules`` is invalid.
        """
        if rules is not None and engine is not None:
            raise ValueError("pass either rules or engine, not both")
        if engine is None:
            engine = DEFAULT_ENGINE if rules is None else MatchEngine(rules)

        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._engine = engine
        self._config = config if config is not None else get_scan_config()
        self._done = False

    @property
    def position(self) -> int:
        """Current cursor offset into the source."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """True once EOF has been produced."""
        return self._done

    def next_token(self) -> Token:
        """Produce the next token.

        Returns:
            The next token, or an EOF token once the input is exhausted.
            EOF is returned again on every later call.
        """
        if self._done:
            return self._make_eof()

        found = self._engine.match_at(self._source, self._pos)
        gap_end = found.start if found is not None else self._source_len

        if not self._config.skips_anything:
            stray = _UNMATCHED_RUN.search(self._source, self._pos, gap_end)
            if stray is not None:
                self._commit_to(stray.start())
                token = self._emit(TokenKind.ERROR, stray.group(), stray.end())
                logger.debug("Unrecognized input %r at %s", token.value, token.location)
                return token

        if found is None:
            self._commit_to(self._source_len)
            self._done = True
            return self._make_eof()

        self._commit_to(found.start)
        kind = self._engine.kind_for(found.rule_index)
        if kind is None:
            token = self._emit(TokenKind.ERROR, found.text, found.end)
            logger.debug(
                "Match %r at %s reported unknown rule index %d",
                token.value,
                token.location,
                found.rule_index,
            )
            return token
        return self._emit(kind, found.text, found.end)

    def tokenize(self) -> Iterator[Token]:
        """Yield the remaining tokens, ending with exactly one EOF token.

        Complexity: O(n * r) worst case, n = len(source), r = number of rules
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenKind.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, stopping before EOF."""
        while True:
            token = self.next_token()
            if token.type is TokenKind.EOF:
                return
            yield token

    # =========================================================================
    # Cursor
    # =========================================================================

    def _commit_to(self, end: int) -> None:
        """Move the cursor forward to ``end``, tracking line and column.

        Args:
            end: Offset to commit to (never less than the cursor).
        """
        if end <= self._pos:
            return

        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl  # chars after last newline + 1
        else:
            self._col += len(segment)

        self._pos = end

    def _emit(self, kind: TokenKind, value: str, end: int) -> Token:
        """Create a token at the cursor, then commit past it."""
        token = Token(
            type=kind,
            value=value,
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=end,
            _source_file=self._source_file,
        )
        self._commit_to(end)
        return token

    def _make_eof(self) -> Token:
        return Token(
            type=TokenKind.EOF,
            value="",
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
