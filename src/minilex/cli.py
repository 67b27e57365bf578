"""Command-line front end: read a source file and list its tokens.

Usage:
    minilex [FILE] [--strict-whitespace] [--no-source] [--fail-on-error] [-v]

Without FILE the file name is read from standard input. Each token is printed
as ``'<lexeme>' -> <kind-name>``; the final EOF token is not printed.

Exit codes:
    0  success
    1  the file could not be read
    2  --fail-on-error was given and the scan produced ERROR tokens
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from minilex import __version__
from minilex.config import SKIP_ANY, SKIP_WHITESPACE, ScanConfig
from minilex.errors import ScanError
from minilex.lexer import Scanner
from minilex.tokens import TokenKind, format_token
from minilex.utils.logger import get_logger

logger = get_logger(__name__)

BANNER = "[_-=-_] Analisador Lexico [_-=-_]"
PROMPT = "Digite o nome do arquivo (ex: Codigo.txt): "
RULE = "-" * 27


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilex",
        description="List the tokens of a source file",
    )
    parser.add_argument("file", nargs="?", help="Source file (prompted for if omitted)")
    parser.add_argument(
        "--strict-whitespace",
        action="store_true",
        help="Only skip whitespace; report other unmatched text as ERROR tokens",
    )
    parser.add_argument(
        "--no-source",
        dest="show_source",
        action="store_false",
        help="Do not print the file contents before the tokens",
    )
    parser.add_argument(
        "--fail-on-error", action="store_true", help="Exit with status 2 if any ERROR token is produced"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _prompt_for_file() -> str | None:
    print(BANNER)
    try:
        name = input(PROMPT)
    except EOFError:
        return None
    return name.strip() or None


def read_source(file_name: str) -> str:
    """Read a whole source file into memory.

    Raises:
        OSError: If the file cannot be opened or decoded.
    """
    try:
        return Path(file_name).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise OSError(f"{file_name}: not valid UTF-8 ({e.reason})") from e


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    file_name = args.file or _prompt_for_file()
    if not file_name:
        print("Erro: nenhum arquivo informado", file=sys.stderr)
        return 1

    try:
        source = read_source(file_name)
    except OSError as e:
        logger.debug("Reading %s failed: %s", file_name, e)
        print(f"Erro: Nao foi possivel abrir o arquivo '{file_name}'", file=sys.stderr)
        return 1

    if args.show_source:
        print(f"\n--- Conteudo do Arquivo ---\n{source}\n{RULE}\n\nSaida:")

    config = ScanConfig(skip_policy=SKIP_WHITESPACE if args.strict_whitespace else SKIP_ANY)
    logger.debug("Scanning %s (%d chars, skip_policy=%s)", file_name, len(source), config.skip_policy)

    first_error = None
    count = 0
    for token in Scanner(source, file_name, config=config):
        print(format_token(token))
        count += 1
        if token.type is TokenKind.ERROR and first_error is None:
            first_error = token
    logger.debug("Produced %d tokens", count)

    if args.fail_on_error and first_error is not None:
        loc = first_error.location
        err = ScanError(
            f"unrecognized input {first_error.value!r}",
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=loc.source_file,
        )
        print(f"Erro: {err}", file=sys.stderr)
        return 2
    return 0
