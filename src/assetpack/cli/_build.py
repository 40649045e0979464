"""``assetpack build`` — writes every package and served file.

Prints each artifact path as it is written.  Exits with code 1 when
the build aborts.
"""

import argparse
import sys
from pathlib import Path

from assetpack.cli._resolve import load_assets
from assetpack.errors import AssetpackError


def run_build(args: argparse.Namespace) -> None:
    assets = load_assets(args)

    def report(path: Path) -> None:
        print(f"Building {path}")

    try:
        written = assets.build(output_root=args.output, on_write=report)
    except AssetpackError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Wrote {len(written)} files")
