"""Command-line entry point: ``ppr -i notes.ppr`` writes ``notes.docx``."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from ppr import Converter, __version__
from ppr.config import LEGACY_SEPARATOR, CompileConfig
from ppr.errors import PprError
from ppr.serialization import to_json
from ppr.source import read_source
from ppr.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def args_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppr",
        description="Compile a paper markup file into a .docx document.",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        metavar="FILE",
        help="Path to the markup file",
        required=True,
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output path (default: input path with a .docx extension)",
        default=None,
    )
    parser.add_argument(
        "--legacy-separator",
        action="store_true",
        help="Separate paragraphs with line breaks instead of backslashes",
    )
    parser.add_argument(
        "--dump-json",
        action="store_true",
        help="Print the compiled document as JSON instead of writing a file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = args_parser().parse_args(argv)

    configure_logging(verbose=args.verbose)

    config = CompileConfig(separator=LEGACY_SEPARATOR) if args.legacy_separator else CompileConfig()
    converter = Converter(config=config)

    try:
        if args.dump_json:
            doc = converter.parse(read_source(args.input), source_file=str(args.input))
            print(to_json(doc, indent=2))
        else:
            output = converter(args.input, args.output)
            logger.info("Converted %s -> %s", args.input, output)
    except PprError as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
