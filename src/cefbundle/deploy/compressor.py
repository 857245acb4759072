"""Optional UPX compression of bundled binaries.

UPX is a size optimization only. When it is not installed the step is
skipped with a warning, and a failure on one file never prevents the next
file from being tried. Only binaries known to survive packing are touched;
resource and data files (.pak, .dat, .bin) are never compressed.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..packages.platform_utils import PlatformDetector

# file name -> upx arguments, in the order they are compressed
COMPRESSIBLE_BINARIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("libcef.dll", ("--best", "--force")),
    ("chrome_elf.dll", ("--best",)),
)


@dataclass
class CompressionResult:
    """Result of compressing one file.

    status is one of "compressed", "missing" or "failed".
    """

    name: str
    path: Path
    status: str
    message: str = ""

    @property
    def success(self) -> bool:
        return self.status == "compressed"


class UpxCompressor:
    """Compresses allow-listed binaries in a bundle with UPX."""

    def __init__(
        self,
        tool: str = "upx",
        binaries: Sequence[Tuple[str, Sequence[str]]] = COMPRESSIBLE_BINARIES,
        show_progress: bool = True,
    ):
        self.tool = tool
        self.binaries = binaries
        self.show_progress = show_progress

    def is_available(self) -> bool:
        """Check whether the UPX executable is on the command search path."""
        probe = [PlatformDetector.which_command(), self.tool]
        try:
            result = subprocess.run(probe, capture_output=True, text=True)
        except OSError:
            return False
        return result.returncode == 0

    def compress_file(self, path: Path, args: Sequence[str]) -> CompressionResult:
        """Compress one binary in place.

        Args:
            path: Binary to compress
            args: Extra upx arguments

        Returns:
            CompressionResult
        """
        if not path.is_file():
            return CompressionResult(name=path.name, path=path, status="missing",
                                     message=f"{path.name} not present in bundle")

        cmd = [self.tool, *args, str(path)]
        if self.show_progress:
            print(f"  $ {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            return CompressionResult(name=path.name, path=path, status="failed", message=str(e))

        if result.returncode != 0:
            return CompressionResult(
                name=path.name, path=path, status="failed",
                message=f"upx exited with code {result.returncode}",
            )
        return CompressionResult(name=path.name, path=path, status="compressed")

    def compress_bundle(self, final_output_dir: Path) -> Optional[List[CompressionResult]]:
        """Compress every allow-listed binary found in the final output directory.

        Args:
            final_output_dir: Relocated bundle directory

        Returns:
            One result per allow-listed binary, or None when UPX is unavailable
        """
        if self.show_progress:
            print("Checking for UPX...")

        if not self.is_available():
            print("Warning: UPX not found in PATH. Skipping compression. "
                  "Install UPX for smaller builds.")
            return None

        if self.show_progress:
            print("UPX found, compressing executables...")

        results = []
        for name, args in self.binaries:
            result = self.compress_file(final_output_dir / name, args)
            if result.success:
                print(f"Successfully compressed {name} with UPX")
            elif result.status == "failed":
                print(f"Warning: Failed to compress {name}: {result.message}")
            results.append(result)
        return results
