"""CEF runtime dependency manifest.

Lists what a CEF-based executable needs next to it to run standalone:

    <bundle>/
    ├── libcef.dll, chrome_elf.dll, ...    # REQUIRED_FILES
    ├── dxcompiler.dll, dxil.dll           # OPTIONAL_FILES (include_dx_compiler)
    ├── resources.pak, icudtl.dat, ...
    ├── <example>.exe.manifest             # only for examples in EXAMPLE_MANIFESTS
    └── locales/
        └── en-US.pak                      # or every locale (min_locales off)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

REQUIRED_FILES: Tuple[str, ...] = (
    "libcef.dll",
    "chrome_elf.dll",
    "v8_context_snapshot.bin",
    "d3dcompiler_47.dll",
    "vk_swiftshader.dll",
    "vulkan-1.dll",
    "resources.pak",
    "chrome_100_percent.pak",
    "chrome_200_percent.pak",
    "icudtl.dat",
    "libEGL.dll",
    "libGLESv2.dll",
    "vk_swiftshader_icd.json",
)

# DirectX shader compiler, only needed by pages using WebGPU
OPTIONAL_FILES: Tuple[str, ...] = (
    "dxcompiler.dll",
    "dxil.dll",
)

LOCALES_DIR = "locales"
DEFAULT_LOCALE = "en-US.pak"

# example name -> manifest path relative to the project directory
EXAMPLE_MANIFESTS: Dict[str, Path] = {
    "cefsimple": Path("cef") / "examples" / "cefsimple" / "win" / "cefsimple.exe.manifest",
}


@dataclass(frozen=True)
class DependencyManifest:
    """Static description of the files copied into a bundle."""

    required_files: Tuple[str, ...] = REQUIRED_FILES
    optional_files: Tuple[str, ...] = OPTIONAL_FILES
    locales_dir: str = LOCALES_DIR
    default_locale: str = DEFAULT_LOCALE
    example_manifests: Dict[str, Path] = field(default_factory=lambda: dict(EXAMPLE_MANIFESTS))

    def files_to_copy(self, include_optional: bool) -> List[str]:
        """Ordered list of runtime file names to copy.

        Args:
            include_optional: Append the optional component files

        Returns:
            File names, required files first
        """
        files = list(self.required_files)
        if include_optional:
            files.extend(self.optional_files)
        return files

    def example_manifest(self, example: str) -> Optional[Path]:
        """Project-relative path of the manifest bundled with `example`, if any.

        The file keeps its name inside the bundle.
        """
        return self.example_manifests.get(example)
