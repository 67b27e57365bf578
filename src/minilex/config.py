"""ContextVar-based scan configuration for minilex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from minilex.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(skip_policy="whitespace")):
        tokens = list(Scanner("x = @1").tokenize())

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from minilex.errors import ConfigError

# Anything that matches no rule is skipped silently.
SKIP_ANY = "any"
# Only whitespace is skipped; other unmatched runs become ERROR tokens.
SKIP_WHITESPACE = "whitespace"

SKIP_POLICIES = frozenset({SKIP_ANY, SKIP_WHITESPACE})


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Note: source_file is per-call state, not configuration. It stays on the
    Scanner instance.

    Attributes:
        skip_policy: How characters matching no rule are treated, either
            ``"any"`` (skip silently) or ``"whitespace"`` (skip whitespace,
            report everything else as ERROR tokens)

    """

    skip_policy: str = SKIP_ANY

    def __post_init__(self) -> None:
        if self.skip_policy not in SKIP_POLICIES:
            raise ConfigError(
                f"Unknown skip_policy {self.skip_policy!r}; "
                f"expected one of {sorted(SKIP_POLICIES)}"
            )

    @property
    def skips_anything(self) -> bool:
        return self.skip_policy == SKIP_ANY

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"skip_policy": "whitespace", "x": 1}).skip_policy
            'whitespace'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "SKIP_ANY",
    "SKIP_WHITESPACE",
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
