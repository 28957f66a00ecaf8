"""Command-line greeting that can also echo an integer."""

from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    """Print a greeting, or echo the integer given on the command line."""
    parser = argparse.ArgumentParser(prog="exercisekit")
    parser.add_argument("number", nargs="?", type=int, help="an integer to echo")
    args = parser.parse_args(argv)
    if args.number is None:
        print("Hello World!")
    else:
        print(f"Entered integer number is {args.number}")
    return 0