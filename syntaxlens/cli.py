"""
syntaxlens command line tool

Dumps the token stream of a source file, one token per line:

    $ syntaxlens Program.cs
    KEYWORD	'using'
    TEXT	' '
    IDENTIFIER	'System'
    ...

Exit status: 0 on success, 1 when the input cannot be read, 2 when the
language is unknown or cannot be guessed.
"""

import argparse
import logging
import sys
from collections import Counter
from typing import List, Optional, TextIO

from . import __version__
from .languages import LanguageRegistry
from .lexer import Scanner, TokenType, InvalidConfiguration

logger = logging.getLogger("syntaxlens.cli")

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="syntaxlens", description="Dump syntax-coloring tokens of a source file")
    p.add_argument("file", nargs="?", help="source file to scan, or - for stdin")
    p.add_argument("-l", "--language", help="language name or alias (guessed from the file extension if omitted)")
    p.add_argument("--stats", action="store_true", help="print token counts per kind instead of the tokens")
    p.add_argument("--list-languages", action="store_true", help="list the registered languages and exit")
    p.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                   help="logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def list_languages(registry: LanguageRegistry, out: TextIO) -> None:
    for definition in registry:
        aliases = ", ".join(definition.aliases) or "-"
        extensions = " ".join(definition.file_extensions) or "-"
        print(f"{definition.name}\taliases: {aliases}\textensions: {extensions}", file=out)


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    registry = LanguageRegistry.default()

    if args.list_languages:
        list_languages(registry, sys.stdout)
        return EXIT_OK

    if not args.file:
        parser.error("a file (or - for stdin) is required")

    try:
        if args.language:
            definition = registry.get(args.language)
        elif args.file == "-":
            print("error: --language is required when reading stdin", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        else:
            definition = registry.for_filename(args.file)
    except InvalidConfiguration as e:
        logger.debug("configuration error %s (%s)", e.code, e.diagnostic.category)
        print(str(e), end="", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        source = read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    logger.info("scanning %s as %s (%d characters)", args.file, definition.name, len(source))
    tokens = Scanner(definition).scan(source)

    if args.stats:
        counts = Counter(token.kind for token in tokens)
        for kind in TokenType:
            if counts[kind]:
                print(f"{kind.name}\t{counts[kind]}")
        return EXIT_OK

    for token in tokens:
        print(f"{token.kind.name}\t{token.lexeme!r}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
