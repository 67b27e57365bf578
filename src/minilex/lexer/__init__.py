"""Order-priority scanner for the minilex language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, MatchEngine
├── engine.py            # Combined alternation over the rule table
└── core.py              # Scanner (cursor + pull interface)

Usage:
    >>> from minilex.lexer import Scanner
    >>> for token in Scanner("if (x >= 1.5) { y = x; }"):
    ...     print(token)
Token(CM_IF, 'if', 1:1)
Token(DELIM_LPAREN, '(', 1:4)
...

"""

from minilex.lexer.core import Scanner
from minilex.lexer.engine import DEFAULT_ENGINE, EngineMatch, MatchEngine

__all__ = ["DEFAULT_ENGINE", "EngineMatch", "MatchEngine", "Scanner"]
