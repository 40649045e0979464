"""Packages — named bundles of script or style files."""

from dataclasses import dataclass
from enum import Enum

from assetpack.busters import add_buster
from assetpack.paths import squeeze_slashes


class MediaType(Enum):
    """Kinds of package, valued by the extension of the built bundle."""

    SCRIPT = "js"
    STYLE = "css"

    @property
    def extension(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Package:
    """A bundle declaration.

    Holds glob patterns only.  Member files are resolved on demand
    against the current registry state (see ``GlobEngine.package_files``).

    Attributes:
        name: Bundle name (``"app"``).
        type: Script or style.
        path: URL directory the bundle is served from (``"/js"``).
        files: Ordered glob patterns over public URIs.
    """

    name: str
    type: MediaType
    path: str
    files: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        """Registry key: ``"app.js"``."""
        return f"{self.name}.{self.type.extension}"

    @property
    def url_path(self) -> str:
        """Public URI of the built bundle: ``"/js/app.js"``."""
        return squeeze_slashes(f"{self.path}/{self.key}")

    def production_path(self, token: str) -> str:
        """Cache-busted URI of the built bundle: ``"/js/app.28389.js"``."""
        return add_buster(self.url_path, token)
