"""Locating the application's assets from a ``"module:attribute"`` string.

The attribute may hold a ready ``Assets`` object, a bare ``AssetConfig``
(optionally paired with a module-level ``configure(assets)`` hook), or
a zero-argument factory returning either.
"""

import argparse
import importlib
import sys
from collections.abc import Callable
from types import ModuleType

from assetpack.assets import Assets
from assetpack.config import AssetConfig
from assetpack.errors import AssetpackError


def resolve_assets(import_string: str) -> Assets:
    """Resolve an import string to an ``Assets`` instance.

    ``"myapp"`` looks up ``myapp.assets``; ``"myapp:site"`` looks up
    ``myapp.site``.  An ``AssetConfig`` found there is turned into
    ``Assets(config, myapp.configure)``, the hook being used only when
    the module defines one.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the attribute yields neither ``Assets`` nor ``AssetConfig``.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name or "assets")

    if callable(obj) and not isinstance(obj, (Assets, AssetConfig)):
        obj = obj()

    if isinstance(obj, AssetConfig):
        return Assets(obj, _configure_hook(module))

    if not isinstance(obj, Assets):
        msg = (
            f"{import_string!r} resolved to {type(obj).__name__}; "
            "expected assetpack.Assets or assetpack.AssetConfig"
        )
        raise TypeError(msg)

    return obj


def _configure_hook(module: ModuleType) -> Callable[[Assets], None] | None:
    hook = getattr(module, "configure", None)
    return hook if callable(hook) else None


def load_assets(args: argparse.Namespace) -> Assets:
    """Resolve ``args.assets``, exiting with code 1 on failure."""
    try:
        return resolve_assets(args.assets)
    except (ModuleNotFoundError, AttributeError, TypeError, AssetpackError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
