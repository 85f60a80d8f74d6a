#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from nadm.core.embedding import DEFAULT_CORE_PATH, DEFAULT_TARGET_PATH, embed_script
from nadm.core.errors import EmbedError, format_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="embed_core.py",
        description="Bake core.sh into nadm/core/embedded.py before packaging.",
    )
    parser.add_argument(
        "--core",
        type=Path,
        default=DEFAULT_CORE_PATH,
        help=f"Script to embed (default: {DEFAULT_CORE_PATH}).",
    )
    parser.add_argument(
        "--target",
        type=Path,
        default=DEFAULT_TARGET_PATH,
        help=f"Module holding the placeholder (default: {DEFAULT_TARGET_PATH}).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        target = embed_script(args.core, args.target)
    except EmbedError as exc:
        print(f"Build failed: {format_error(exc)}", file=sys.stderr)
        return 1
    print(f"Build complete: core.sh embedded into {target}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
