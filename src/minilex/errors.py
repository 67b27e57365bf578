"""Exception classes for minilex.

Malformed source text never raises: the scanner reports it as ERROR tokens.
These exceptions cover programmer errors (bad rule tables, bad configuration)
and the opt-in strict reporting of the command-line front end.
"""

from __future__ import annotations


class MinilexError(Exception):
    """Base exception for all minilex errors."""

    pass


class RuleError(MinilexError):
    """Invalid lexical rule table.

    Raised when a custom rule table is empty, contains a pattern that does
    not compile, can match the empty string, or targets a reserved kind.
    """

    def __init__(
        self,
        message: str,
        rule_index: int | None = None,
        pattern: str | None = None,
    ) -> None:
        """Initialize rule error.

        Args:
            message: Description of the problem
            rule_index: Position of the offending rule in the table (optional)
            pattern: The offending pattern (optional)
        """
        self.message = message
        self.rule_index = rule_index
        self.pattern = pattern

        prefix = ""
        if rule_index is not None:
            prefix = f"rule {rule_index}"
            if pattern is not None:
                prefix += f" ({pattern!r})"
            prefix += ": "

        super().__init__(f"{prefix}{message}")


class ConfigError(MinilexError):
    """Invalid scan configuration value."""

    pass


class ScanError(MinilexError):
    """Unrecognized input reported as an error.

    The scanner itself never raises this; callers that want to halt on the
    first ERROR token (such as ``minilex --fail-on-error``) build it from the
    token's location.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
