"""Command-line entry point."""

from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    parser = argparse.ArgumentParser(prog="chesskit")
    parser.parse_args(argv)
    print("Hello, world!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())