"""``assetpack files`` and ``assetpack resolve`` — read-only lookups."""

import argparse
import sys

from assetpack.cli._resolve import load_assets


def run_files(args: argparse.Namespace) -> None:
    """Print ``uri -> local path`` for every served file."""
    assets = load_assets(args)
    for uri, local in sorted(assets.all_files().items()):
        print(f"{uri} -> {local}")


def run_resolve(args: argparse.Namespace) -> None:
    """Print the file backing ``args.uri``; exit 1 when nothing does."""
    assets = load_assets(args)
    local = assets.resolve(args.uri)
    if local is None:
        local = assets.resolve_dynamic(args.uri)
    if local is None:
        print(f"Not found: {args.uri}", file=sys.stderr)
        raise SystemExit(1)
    print(local)
