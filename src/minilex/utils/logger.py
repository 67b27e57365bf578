"""Logger lookup for minilex modules.

All library loggers live under the ``minilex`` namespace so one
``logging.getLogger("minilex").setLevel(...)`` call controls the scanner
and the command line together. The library never installs handlers; the
``minilex -v`` flag does that.

Example:
    >>> from minilex.utils.logger import get_logger
    >>> get_logger("minilex.lexer.core").name
    'minilex.lexer.core'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``minilex`` namespace.

    Names outside the namespace are moved under it, so ``"cli"`` and
    ``"minilex.cli"`` give the same logger.
    """
    if not (name == "minilex" or name.startswith("minilex.")):
        name = f"minilex.{name}"
    return logging.getLogger(name)
