#!/usr/bin/env python3
"""Word counter CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .config import CounterConfig
from .runner import count_file

INPUT_PROMPT = "Enter the name of the input text file: "
OUTPUT_PROMPT = "Enter the name of the output file: "


def main() -> int:
    """Count the words of a text file into an HTML table."""
    parser = argparse.ArgumentParser(
        description="Count words in a text file and write an HTML report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                 # Prompt for input and output files
  %(prog)s story.txt story.html            # Count words without prompting
  %(prog)s story.txt story.html --config wordtally.yml
  %(prog)s story.txt story.html --keep-open-tags
        """,
    )

    parser.add_argument("input", nargs="?", type=Path, help="Input text file")
    parser.add_argument("output", nargs="?", type=Path, help="Output HTML file")
    parser.add_argument("--config", type=Path, metavar="PATH", help="Path to YAML config")
    parser.add_argument(
        "--keep-open-tags",
        action="store_true",
        help="Leave the table, body and html elements unclosed",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Load config
    config = CounterConfig()
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        config = CounterConfig.from_yaml(args.config)

    if args.keep_open_tags:
        config.report.close_tags = False

    # Prompt for whatever was not given on the command line
    input_path = args.input
    if input_path is None:
        input_path = Path(input(INPUT_PROMPT).strip())
    output_path = args.output
    if output_path is None:
        output_path = Path(input(OUTPUT_PROMPT).strip())

    if not input_path.is_file():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    result = count_file(input_path, output_path, config)

    print(
        f"Counted {result.unique_words} unique words from {result.total_words} total "
        f"-> {result.output_path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
