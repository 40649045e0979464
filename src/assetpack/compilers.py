"""Compile integrations — source formats that render to a served format.

Each compiler is registered under its source extension together with
the extension it produces.  ``Compilers.formats()`` is the extension
map handed to the registry, so ``theme.kcss`` is published as
``theme.css``.

Built in:

- ``kcss`` -> ``css`` and ``kjs`` -> ``js``: kida templates, rendered with
  the configured template context.
- ``md`` -> ``html``: Markdown via patitas (``pip install assetpack[markdown]``).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeAlias

from kida import Environment, FileSystemLoader

from assetpack.errors import CompilerNotInstalledError

if TYPE_CHECKING:
    from patitas import Markdown

# (source file, template context) -> compiled text
CompileFn: TypeAlias = Callable[[Path, Mapping[str, Any]], str]


@dataclass(frozen=True, slots=True)
class Compiler:
    """One registered compile integration."""

    source: str
    target: str
    compile: CompileFn


class Compilers:
    """Registry of compile integrations keyed by source extension.

    Registering an extension twice keeps the last registration.
    """

    __slots__ = ("_compilers",)

    def __init__(self) -> None:
        self._compilers: dict[str, Compiler] = {}

    def register(self, source: str, target: str, compile: CompileFn) -> None:
        """Compile ``*.source`` files with *compile*, serving them as ``*.target``."""
        source, target = source.lstrip("."), target.lstrip(".")
        self._compilers[source] = Compiler(source=source, target=target, compile=compile)

    def get(self, extension: str) -> Compiler | None:
        return self._compilers.get(extension.lstrip("."))

    def formats(self) -> dict[str, str]:
        """Extension map: source extension -> served extension."""
        return {c.source: c.target for c in self._compilers.values()}

    def compile(self, path: Path, context: Mapping[str, Any]) -> str | None:
        """Compile *path* when a compiler handles its extension, else ``None``."""
        compiler = self.get(path.suffix)
        if compiler is None:
            return None
        return compiler.compile(path, context)

    def __contains__(self, extension: object) -> bool:
        return isinstance(extension, str) and extension.lstrip(".") in self._compilers

    def __len__(self) -> int:
        return len(self._compilers)


def compile_template(path: Path, context: Mapping[str, Any]) -> str:
    """Render a kida template file as plain text (no HTML escaping)."""
    env = Environment(
        loader=FileSystemLoader(str(path.parent)),
        autoescape=False,
    )
    template = env.get_template(path.name)
    return template.render(dict(context))


def compile_markdown(path: Path, context: Mapping[str, Any]) -> str:
    """Render a Markdown file to HTML."""
    source = path.read_text(encoding="utf-8")
    if not source:
        return ""
    return _get_markdown()(source)


def _get_markdown() -> Markdown:
    """Create a patitas Markdown instance, raising a clear error if missing."""
    try:
        from patitas import Markdown
    except ImportError:
        msg = (
            "Compiling .md assets requires 'patitas'. "
            "Install with: pip install assetpack[markdown]"
        )
        raise CompilerNotInstalledError(msg) from None

    return Markdown(plugins=["all"], highlight=False)


def default_compilers() -> Compilers:
    """The built-in integrations."""
    compilers = Compilers()
    compilers.register("kcss", "css", compile_template)
    compilers.register("kjs", "js", compile_template)
    compilers.register("md", "html", compile_markdown)
    return compilers
