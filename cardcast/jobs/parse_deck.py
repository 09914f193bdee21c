"""
Parse a deck list file and print it as JSON.

Usage:
    cardcast-parse deck.txt
    pbpaste | cardcast-parse --game magic
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from cardcast.parsers import parse_deck_list

logger = logging.getLogger(__name__)


def read_deck_text(path: str) -> str:
    """Read deck text from a file, or stdin when path is "-"."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def run_parse(path: str, game: str = "auto", indent: int | None = 2) -> str:
    """Parse the deck at path and return its JSON rendering."""
    text = read_deck_text(path)
    deck = parse_deck_list(text, game=game)

    logger.info(
        "Parsed %s deck from %s: %d cards",
        deck.family.value,
        "stdin" if path == "-" else path,
        deck.total_cards(),
    )

    payload = deck.to_dict()
    payload["counts"] = deck.section_counts()
    payload["total_cards"] = deck.total_cards()
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cardcast-parse",
        description="Parse a Pokémon or Magic deck list export into JSON.",
    )
    parser.add_argument("path", nargs="?", default="-", help="Deck list file (default: stdin)")
    parser.add_argument(
        "--game",
        choices=("auto", "magic", "pokemon"),
        default="auto",
        help="Grammar to parse with (default: detect)",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        output = run_parse(args.path, game=args.game, indent=args.indent or None)
    except OSError as e:
        logger.error("Failed to read deck list: %s", e)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
