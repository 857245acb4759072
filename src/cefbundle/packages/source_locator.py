"""CEF runtime source discovery.

The CEF binary distribution is exported once per machine to a well-known
directory:

    ~/.local/share/cef/
    ├── libcef.dll, resources.pak, ...   # flat layout
    ├── locales/
    └── Release/                         # Windows layout: binaries one level deeper
        ├── libcef.dll, ...
        └── locales/

The base directory is what cargo's CEF build script reads from CEF_PATH. When
a Release/ subdirectory exists, it supersedes the base as the place runtime
files are copied from.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ..errors import SourceRootError
from .platform_utils import PlatformDetector

CEF_RELATIVE_PATH = Path(".local") / "share" / "cef"
RELEASE_SUBDIR = "Release"
EXPORT_COMMAND = "cargo run -p export-cef-dir -- --force $HOME/.local/share/cef"


@dataclass(frozen=True)
class SourceRoot:
    """Resolved CEF runtime location.

    Attributes:
        cef_path: Exported CEF directory (value of CEF_PATH for the build)
        bin_dir: Directory runtime files are copied from
    """

    cef_path: Path
    bin_dir: Path


class SourceLocator:
    """Locates and validates the exported CEF runtime directory."""

    def __init__(
        self,
        home_dir: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        show_progress: bool = True,
    ):
        """Initialize the locator.

        Args:
            home_dir: Home directory override (default: from HOME/USERPROFILE)
            environ: Environment used to find the home directory
            show_progress: Print the resolved locations
        """
        self.home_dir = home_dir
        self.environ = environ
        self.show_progress = show_progress

    def default_cef_path(self) -> Path:
        """Expected location of the exported CEF directory.

        Raises:
            SourceRootError: If no home directory can be determined
        """
        home = self.home_dir or PlatformDetector.home_dir(self.environ)
        if home is None:
            raise SourceRootError(
                "Cannot locate the CEF source directory: neither HOME nor USERPROFILE is set."
            )
        return Path(home) / CEF_RELATIVE_PATH

    def locate(self) -> SourceRoot:
        """Validate the CEF directory and pick the directory to copy from.

        Returns:
            SourceRoot with the base and effective binary directories

        Raises:
            SourceRootError: If the CEF directory is missing or not a directory
        """
        cef_path = self.default_cef_path()

        if self.show_progress:
            print(f"Using CEF_PATH: {cef_path}")

        if not cef_path.exists():
            raise SourceRootError(
                f"Default CEF source path not found: '{cef_path}'. "
                + f"Please ensure CEF is exported using '{EXPORT_COMMAND}'."
            )
        if not cef_path.is_dir():
            raise SourceRootError(
                f"Default CEF source path exists but is not a directory: '{cef_path}'"
            )

        bin_dir = cef_path
        release_dir = cef_path / RELEASE_SUBDIR
        if release_dir.is_dir():
            bin_dir = release_dir

        if self.show_progress:
            print(f"Using CEF binaries from: {bin_dir}")

        return SourceRoot(cef_path=cef_path, bin_dir=bin_dir)
