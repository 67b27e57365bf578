"""Token and TokenKind definitions for the minilex scanner.

The scanner produces a stream of Token objects. Each Token has a kind, the
exact lexeme it was matched from, and its source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Equality only looks at (type, value), so tokens from different positions
with the same lexeme compare equal.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilex.location import SourceLocation


class TokenKind(Enum):
    """Closed set of token kinds for the language.

    Organized by category:
    - Stream control (EOF, ERROR)
    - Reserved words and type markers
    - Identifiers and literals
    - Operators
    - Delimiters

    """

    # Stream control
    EOF = auto()
    ERROR = auto()

    # Reserved words
    CM_VAR = auto()  # var
    CM_IF = auto()  # if
    CM_ELSE = auto()  # else
    CM_WHILE = auto()  # while
    TYPE_INT = auto()  # int
    TYPE_REAL = auto()  # real

    # Identifiers and literals
    ID = auto()
    NUM = auto()  # 10, 3.14

    # Arithmetic and assignment
    OP_ADD = auto()  # +
    OP_SUB = auto()  # -
    OP_MULT = auto()  # *
    OP_DIV = auto()  # /
    OP_POW = auto()  # ^
    CM_ATRIB = auto()  # =

    # Relational
    OP_GT = auto()  # >
    OP_LT = auto()  # <
    OP_GE = auto()  # >=
    OP_LE = auto()  # <=
    OP_EQ = auto()  # ==
    OP_NE = auto()  # !=

    # Delimiters
    DELIM_LPAREN = auto()  # (
    DELIM_RPAREN = auto()  # )
    DELIM_LBRACE = auto()  # {
    DELIM_RBRACE = auto()  # }
    DELIM_COMMA = auto()  # ,
    DELIM_SEMICOLON = auto()  # ;
    DELIM_DOT = auto()  # .

    @property
    def is_delimiter(self) -> bool:
        return self in DELIMITERS

    @property
    def is_reserved(self) -> bool:
        return self in RESERVED_WORDS


RESERVED_WORDS = frozenset(
    {
        TokenKind.CM_VAR,
        TokenKind.CM_IF,
        TokenKind.CM_ELSE,
        TokenKind.CM_WHILE,
        TokenKind.TYPE_INT,
        TokenKind.TYPE_REAL,
    }
)

DELIMITERS = frozenset(
    {
        TokenKind.DELIM_LPAREN,
        TokenKind.DELIM_RPAREN,
        TokenKind.DELIM_LBRACE,
        TokenKind.DELIM_RBRACE,
        TokenKind.DELIM_COMMA,
        TokenKind.DELIM_SEMICOLON,
        TokenKind.DELIM_DOT,
    }
)

UNKNOWN_TOKEN_NAME = "TOKEN_DESCONHECIDO"

# Display names used in diagnostics. Kinds missing here (EOF, ERROR, OP_POW)
# fall back to UNKNOWN_TOKEN_NAME.
_TOKEN_NAMES: dict[TokenKind, str] = {
    TokenKind.CM_VAR: "CM_VAR",
    TokenKind.CM_IF: "CM_IF",
    TokenKind.CM_ELSE: "CM_ELSE",
    TokenKind.CM_WHILE: "CM_WHILE",
    TokenKind.TYPE_INT: "TYPE_INT",
    TokenKind.TYPE_REAL: "TYPE_REAL",
    TokenKind.ID: "ID",
    TokenKind.NUM: "NUM",
    TokenKind.OP_ADD: "OP_ADD",
    TokenKind.OP_SUB: "OP_SUB",
    TokenKind.OP_MULT: "OP_MULT",
    TokenKind.OP_DIV: "OP_DIV",
    TokenKind.OP_GT: "OP_GT",
    TokenKind.OP_LT: "OP_LT",
    TokenKind.OP_GE: "OP_GE",
    TokenKind.OP_LE: "OP_LE",
    TokenKind.OP_EQ: "OP_EQ",
    TokenKind.OP_NE: "OP_NE",
    TokenKind.CM_ATRIB: "CM_ATRIB",
    **{kind: "DELIM" for kind in DELIMITERS},
}


def token_name(kind: TokenKind) -> str:
    """Return the display name of a token kind.

    Every delimiter maps to ``"DELIM"``; kinds without a display name map
    to ``"TOKEN_DESCONHECIDO"``.

    Example:
        >>> token_name(TokenKind.OP_GE)
        'OP_GE'
        >>> token_name(TokenKind.DELIM_SEMICOLON)
        'DELIM'
    """
    return _TOKEN_NAMES.get(kind, UNKNOWN_TOKEN_NAME)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token kind (from TokenKind enum)
        value: The exact lexeme matched in the source
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _source_file: Optional source file path

    Only ``type`` and ``value`` take part in comparison and hashing.

    """

    type: TokenKind
    value: str
    _lineno: int = field(default=1, compare=False)
    _col: int = field(default=1, compare=False)
    _start_offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _source_file: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from minilex.location import SourceLocation

        # Custom rules may match across newlines
        newlines = self.value.count("\n")
        if newlines:
            end_col = len(self.value) - self.value.rfind("\n")
        else:
            end_col = self._col + len(self.value)

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._lineno + newlines,
            end_col_offset=end_col,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def name(self) -> str:
        """Display name of this token's kind."""
        return token_name(self.type)

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col


def format_token(token: Token) -> str:
    """Render a token the way the command-line listing prints it.

    Example:
        >>> format_token(Token(TokenKind.NUM, "10"))
        "'10' -> NUM"
    """
    return f"'{token.value}' -> {token_name(token.type)}"
