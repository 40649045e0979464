"""Assetpack CLI — build artifacts and inspect asset resolution.

Entry point registered as ``assetpack`` in ``pyproject.toml``::

    [project.scripts]
    assetpack = "assetpack.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``assetpack`` command."""
    parser = argparse.ArgumentParser(
        prog="assetpack",
        description="Assetpack — asset registry and build engine for web applications.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- assetpack build --------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Write packages and served files")
    build_parser.add_argument(
        "assets",
        help="Import string (e.g. myapp:assets)",
    )
    build_parser.add_argument(
        "--output",
        default=None,
        help="Output directory (defaults to the configured output_path)",
    )

    # -- assetpack files --------------------------------------------------
    files_parser = subparsers.add_parser("files", help="List every served file")
    files_parser.add_argument(
        "assets",
        help="Import string (e.g. myapp:assets)",
    )

    # -- assetpack resolve ------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show the local file behind a URI")
    resolve_parser.add_argument(
        "assets",
        help="Import string (e.g. myapp:assets)",
    )
    resolve_parser.add_argument("uri", help="Public URI (e.g. /js/app.js)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "build":
        from assetpack.cli._build import run_build

        run_build(args)
    elif args.command == "files":
        from assetpack.cli._inspect import run_files

        run_files(args)
    elif args.command == "resolve":
        from assetpack.cli._inspect import run_resolve

        run_resolve(args)
