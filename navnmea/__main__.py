"""Command-line decoder: ``python -m navnmea [SENTENCE ...]``.

Sentences are taken from the arguments, or one per line from stdin when no
argument is given. All sentences go through one parser, so the rows of a
GSV group fed in order accumulate into one satellite list.
"""

import argparse
import dataclasses
import json
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from navnmea.nmea.errors import NMEAError
from navnmea.nmea_parser import NMEAParser

_SEPARATOR = "-" * 52


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="navnmea", description="Decode NMEA 0183 sentences"
    )
    parser.add_argument(
        "sentences",
        nargs="*",
        help="Sentences to decode (default: read one per line from stdin)",
    )
    parser.add_argument(
        "--no-checksum",
        dest="validate_checksum",
        action="store_false",
        help="Accept sentences whose checksum does not match",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full snapshot as JSON instead of a summary",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def _read_sentences(arguments: Sequence[str], stream: TextIO) -> Iterable[str]:
    if arguments:
        return arguments
    return (line.strip() for line in stream if line.strip())


def _render(parser: NMEAParser, as_json: bool) -> str:
    if as_json:
        return json.dumps(dataclasses.asdict(parser.to_snapshot()))
    return parser.summary() + _SEPARATOR


def main(argv: Sequence[str] | None = None) -> int:
    """Decode every sentence and print it; return 1 if any was rejected."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = NMEAParser(validate_checksum=args.validate_checksum)
    status = 0
    for sentence in _read_sentences(args.sentences, sys.stdin):
        try:
            parser.parse(sentence)
        except NMEAError as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 1
            continue
        print(_render(parser, args.json))

    return status


if __name__ == "__main__":
    sys.exit(main())
