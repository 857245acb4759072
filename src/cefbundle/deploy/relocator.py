"""Bundle relocation.

Moves the assembled bundle out of cargo's example output directory into the
final output directory:

    1. Clear the final output directory (delete every direct child), or
       create it when it does not exist.
    2. Move every direct child of the build output directory into it,
       except debug-symbol files when skip_pdb is set. Those stay behind.

Each entry is moved by copy-then-delete (see fs_utils.move_path), so a source
is never removed before its copy exists. There is no rollback across
entries: an error mid-batch leaves a partially relocated bundle, and running
the tool again starts over from step 1.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from tqdm import tqdm

from ..errors import RelocationError
from ..fs_utils import move_path, remove_path

DEBUG_SYMBOL_SUFFIX = ".pdb"


@dataclass
class RelocationReport:
    """What the relocator did."""

    final_output_dir: Path
    cleared: List[str] = field(default_factory=list)
    moved: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


def is_debug_symbol_file(name: str) -> bool:
    return name.lower().endswith(DEBUG_SYMBOL_SUFFIX)


class Relocator:
    """Moves a build output directory's contents to the final output directory."""

    def __init__(self, show_progress: bool = True):
        """Initialize the relocator.

        Args:
            show_progress: Print progress and show a progress bar
        """
        self.show_progress = show_progress

    def relocate(
        self, build_output_dir: Path, final_output_dir: Path, skip_debug_symbols: bool = True
    ) -> RelocationReport:
        """
        Replace the final output directory's contents with the build output.

        Args:
            build_output_dir: Directory holding the assembled bundle
            final_output_dir: Directory receiving the bundle
            skip_debug_symbols: Leave *.pdb files in the build output directory

        Returns:
            RelocationReport

        Raises:
            RelocationError: If the directories overlap, the build output
                directory is missing, or the final directory cannot be created
        """
        build_output_dir = Path(build_output_dir).resolve()
        final_output_dir = Path(final_output_dir).resolve()
        self._check_directories(build_output_dir, final_output_dir)

        if self.show_progress:
            print(f"Moving build output from {build_output_dir} to {final_output_dir}")

        report = RelocationReport(final_output_dir=final_output_dir)
        report.cleared = self.prepare_destination(final_output_dir)

        entries = sorted(build_output_dir.iterdir(), key=lambda p: p.name)
        for entry in tqdm(entries, desc="Moving files", unit="file", disable=not self.show_progress):
            if skip_debug_symbols and is_debug_symbol_file(entry.name):
                report.skipped.append(entry.name)
                if self.show_progress:
                    tqdm.write(f"Skipping debug symbols file: {entry.name}")
                continue

            move_path(entry, final_output_dir / entry.name)
            report.moved.append(entry.name)

        return report

    def prepare_destination(self, final_output_dir: Path) -> List[str]:
        """Empty the final output directory, creating it if needed.

        Args:
            final_output_dir: Directory to prepare

        Returns:
            Names of the entries that were removed

        Raises:
            RelocationError: If the directory cannot be created
        """
        if final_output_dir.is_dir():
            cleared = []
            for child in sorted(final_output_dir.iterdir(), key=lambda p: p.name):
                if remove_path(child):
                    cleared.append(child.name)
            return cleared

        try:
            final_output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RelocationError(
                f"Cannot create final output directory {final_output_dir}: {e}"
            ) from e
        return []

    @staticmethod
    def _check_directories(build_output_dir: Path, final_output_dir: Path) -> None:
        if not build_output_dir.is_dir():
            raise RelocationError(f"Build output directory not found: {build_output_dir}")

        if build_output_dir == final_output_dir:
            raise RelocationError(
                f"Final output directory is the build output directory: {final_output_dir}"
            )
        # Clearing one would destroy the other
        if final_output_dir in build_output_dir.parents or build_output_dir in final_output_dir.parents:
            raise RelocationError(
                f"Final output directory {final_output_dir} and build output directory "
                + f"{build_output_dir} must not contain each other"
            )
