"""Command-line interface for tablemorph."""

import argparse
from multiprocessing import cpu_count


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="tablemorph",
        description="Generate word variants from a dictionary and a substitution table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Every variant with 1 to 3 substituted spans
  %(prog)s words.txt -t leet.table -m 1 -x 3 > candidates.txt

  # Merge two tables, substitute whole patterns (transliteration)
  %(prog)s words.txt -t leet.table -t extra.table --substitute-all

  # Most substituted variants first
  %(prog)s words.txt -t leet.table --reverse -j 4

  # Using JSON config
  %(prog)s --config config.json

Substitution table format (one entry per line, '#' starts a comment):
  o=0
  a=@
  $HEX[3d]=$HEX[2d]    # hashcat notation, needed to substitute '='

Example config.json:
{
  "dictionary": "words.txt",
  "tables": ["leet.table"],
  "min_substitutions": 1,
  "max_substitutions": 4,
  "substitute_all": false,
  "reverse": false,
  "jobs": 4,
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Inputs
    parser.add_argument("dictionary", nargs="?", help="Dictionary file, one word per line")
    parser.add_argument(
        "-t",
        "--table",
        dest="tables",
        action="append",
        help="Substitution table file (repeat to merge several, in order)",
    )

    # Parameters
    parser.add_argument(
        "-m",
        "--min",
        "--table-min",
        dest="min_substitutions",
        type=int,
        default=0,
        help="Minimum substitutions per variant (0 behaves like 1)",
    )
    parser.add_argument(
        "-x",
        "--max",
        "--table-max",
        dest="max_substitutions",
        type=int,
        default=15,
        help="Maximum substitutions per variant",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        "--threads",
        dest="jobs",
        type=int,
        help=f"Number of parallel workers, -1 for all cores (default: {cpu_count()})",
    )

    # Modes
    parser.add_argument(
        "-s",
        "--substitute-all",
        action="store_true",
        help="Substitute every occurrence of a pattern at once (transliteration)",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Start from the most substituted variants and work down",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
