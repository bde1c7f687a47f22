#!/usr/bin/env python3

# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

"""
Convert a JSON document into normalized CSV tables.

Usage:
    json2csv input.json \
        [--print-ast] \
        [-out-dir DIR] \
        [--table NAME] \
        [--max-columns N] \
        [--describe] \
        [--verbose]
"""

import argparse
import json
import logging
import os
import sys

from .engine import convert
from .profiling import describe_tables
from .schema import MAX_COLUMNS, MIN_COLUMNS
from .tree import format_tree


def build_parser():
    parser = argparse.ArgumentParser(prog="json2csv", description="Convert JSON into normalized CSV tables")
    parser.add_argument("input", help="JSON file path")
    parser.add_argument("--print-ast", action="store_true", help="Print the parsed JSON tree before converting")
    parser.add_argument("-out-dir", "--out-dir", "-o", dest="out_dir", default=".", help="Output directory (created if missing)")
    parser.add_argument("-t", "--table", default=None, help="Root table name (from filename if omitted)")
    parser.add_argument("--max-columns", type=int, default=MAX_COLUMNS, help="Column limit per table, including id")
    parser.add_argument("--describe", action="store_true", help="Print a descriptive profile of the inferred tables (guessed column types, not DDL)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_columns < MIN_COLUMNS:
        parser.error(f"--max-columns must be at least {MIN_COLUMNS}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # derive table name from filename if omitted
    base_name = args.table if args.table is not None else os.path.splitext(os.path.basename(args.input))[0]

    try:
        with open(args.input, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: {args.input} is not valid JSON: {e}", file=sys.stderr)
        return 1

    if args.print_ast:
        print("--- Abstract Syntax Tree ---")
        print(format_tree(data))
        print("--------------------------\n")

    print(f"Processing JSON and generating CSVs into directory: {args.out_dir}")
    try:
        registry = convert(data, args.out_dir, base_name, max_columns=args.max_columns, profile=args.describe)
    except OSError as e:
        print(f"Error: cannot write CSV output: {e}", file=sys.stderr)
        return 1

    if not registry:
        print("No tables generated for this JSON.")
        return 0
    print(f"CSV files written to {args.out_dir}: {', '.join(t.name + '.csv' for t in registry)}")
    if args.describe:
        print()
        print(describe_tables(registry))
    return 0


if __name__ == "__main__":
    sys.exit(main())
