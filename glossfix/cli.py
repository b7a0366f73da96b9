"""Command-line interface."""

import argparse
from multiprocessing import cpu_count


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="glossfix",
        description="Repair spacing in text selected from PDF course material",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Clean a single selection
  %(prog)s "r a n s o m w a r e"

  # Clean one selection per line from a file
  %(prog)s -i selections.txt -o cleaned.txt

  # Read from stdin and emit a JSON report with patterns and confidence
  pbpaste | %(prog)s --report

  # Using JSON config (CLI overrides JSON)
  %(prog)s --config config.json -i selections.txt -v

  # Trace how particular words are segmented
  %(prog)s -i selections.txt --debug --debug-words service,attack

Example config.json:
{
  "top_n": 5000,
  "min_fallback_length": 4,
  "max_word_length": 20,
  "greedy_max_word_length": 15,
  "extra_rules": "~/glossary/rules.yaml",
  "verbose": true,
  "jobs": 4
}
        """,
    )

    parser.add_argument(
        "texts", nargs="*", help="Selections to clean (default: read --input or stdin)"
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input / output
    parser.add_argument("-i", "--input", type=str, help="File with one selection per line")
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "--report",
        action="store_true",
        help="Emit a JSON array with pattern, strategy, tokens and confidence per selection",
    )

    # Dictionary and rules
    parser.add_argument(
        "--top-n",
        type=int,
        help="Extend the built-in dictionary with the top N wordfreq words",
    )
    parser.add_argument(
        "--extra-rules", type=str, help="YAML file with additional repair rules"
    )

    # Segmentation tuning
    parser.add_argument(
        "--min-fallback-length",
        type=int,
        help="Accept any alphabetic candidate of at least this length as a word",
    )
    parser.add_argument(
        "--max-word-length", type=int, help="Longest word the optimal segmenter considers"
    )
    parser.add_argument(
        "--greedy-max-word-length",
        type=int,
        help="Longest word the greedy fallback considers",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    parser.add_argument(
        "--debug-words",
        type=str,
        help="Comma separated words to trace through segmentation (requires --debug)",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers (default: 1, available: {cpu_count()})",
    )

    return parser
