"""Command-line entry point: solve a matrix read from a file or stdin."""

from __future__ import annotations

import argparse
import sys

from .submatrix import solve


def main(argv=None):
    """Print the best rectangle's corners and its area; return an exit code."""
    parser = argparse.ArgumentParser(
        prog="distinctgrid",
        description="Find the largest submatrix whose elements are all distinct.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="file holding 'n m' and the matrix rows (default: stdin)",
    )
    args = parser.parse_args(argv)

    try:
        if args.path == "-":
            text = sys.stdin.read()
        else:
            with open(args.path, encoding="utf-8") as handle:
                text = handle.read()
        result = solve(text)
    except (OSError, ValueError) as exc:
        print(f"distinctgrid: {exc}", file=sys.stderr)
        return 1

    rect = result.rect
    print(rect.r1, rect.c1, rect.r2, rect.c2)
    print(result.area)
    return 0


if __name__ == "__main__":
    sys.exit(main())