"""Command-line entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    parser = argparse.ArgumentParser(prog="flaccodec", description="FLAC decoder/encoder")
    parser.parse_args(argv)
    print("Hell, Hello!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())