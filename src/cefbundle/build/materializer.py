"""Runtime dependency materialization.

Copies the CEF runtime files listed in the DependencyManifest from the CEF
binary directory into cargo's example output directory, so the freshly built
executable can run from there and the whole directory can be relocated as one
bundle.

Failure policy:
    - A missing or unreadable runtime file is a warning; copying continues.
    - A missing locales/ directory is a warning; locales are skipped.
    - Failing to create a destination directory is fatal (MaterializationError).
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config.options import BundleToggles
from ..errors import MaterializationError
from ..fs_utils import copy_tree_overwrite
from ..packages.manifest import DependencyManifest


@dataclass
class CopyOutcome:
    """Result of copying a single runtime file."""

    name: str
    source: Path
    copied: bool
    message: str = ""


@dataclass
class MaterializeReport:
    """Summary of a materialization pass."""

    copied: List[str] = field(default_factory=list)
    locales: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class DependencyMaterializer:
    """Populates a build output directory with the CEF runtime."""

    def __init__(self, manifest: Optional[DependencyManifest] = None, show_progress: bool = True):
        """Initialize the materializer.

        Args:
            manifest: Files to copy (default: the standard CEF manifest)
            show_progress: Print progress and warnings
        """
        self.manifest = manifest or DependencyManifest()
        self.show_progress = show_progress

    def materialize(
        self,
        bin_dir: Path,
        build_output_dir: Path,
        example: str,
        project_dir: Path,
        toggles: BundleToggles,
    ) -> MaterializeReport:
        """
        Copy every runtime dependency into the build output directory.

        Args:
            bin_dir: Effective CEF binary directory
            build_output_dir: Cargo example output directory
            example: Example name (selects example-specific manifests)
            project_dir: Project root (example manifests are relative to it)
            toggles: Size/packaging switches

        Returns:
            MaterializeReport listing copied files and warnings

        Raises:
            MaterializationError: If a destination directory cannot be created
        """
        if self.show_progress:
            print(f"Copying CEF runtime files to build output directory: {build_output_dir}")

        report = MaterializeReport()
        self._ensure_dir(build_output_dir)

        for name in self.manifest.files_to_copy(toggles.include_dx_compiler):
            outcome = self.copy_file(bin_dir / name, build_output_dir / name)
            self._report(report, outcome, "CEF source file not found")

        self.copy_locales(bin_dir, build_output_dir, toggles.min_locales, report)

        manifest_path = self.manifest.example_manifest(example)
        if manifest_path is not None:
            source = project_dir / manifest_path
            outcome = self.copy_file(source, build_output_dir / manifest_path.name)
            self._report(report, outcome, "Manifest file not found")

        if self.show_progress:
            print(f"Dependency copying complete ({len(report.copied)} files, "
                  f"{len(report.warnings)} warnings).")
        return report

    def copy_file(self, source: Path, dest: Path) -> CopyOutcome:
        """Copy one file, overwriting `dest`.

        Args:
            source: File to copy
            dest: Destination file path

        Returns:
            CopyOutcome; `copied` is False when the source is missing or unreadable
        """
        if not source.is_file():
            return CopyOutcome(name=dest.name, source=source, copied=False, message=str(source))
        try:
            shutil.copy2(source, dest)
        except OSError as e:
            return CopyOutcome(
                name=dest.name, source=source, copied=False, message=f"{source} ({e})"
            )
        return CopyOutcome(name=dest.name, source=source, copied=True)

    def copy_locales(
        self,
        bin_dir: Path,
        build_output_dir: Path,
        min_locales: bool,
        report: MaterializeReport,
    ) -> None:
        """Replace the destination locales/ directory with the selected locales.

        Args:
            bin_dir: Effective CEF binary directory
            build_output_dir: Cargo example output directory
            min_locales: Copy only the default locale pack
            report: Report to record results in
        """
        source_dir = bin_dir / self.manifest.locales_dir
        dest_dir = build_output_dir / self.manifest.locales_dir

        if not source_dir.is_dir():
            self._warn(report, f"CEF locales directory not found: {source_dir}")
            return

        try:
            shutil.rmtree(dest_dir)
        except FileNotFoundError:
            pass
        self._ensure_dir(dest_dir)

        if min_locales:
            locale = self.manifest.default_locale
            outcome = self.copy_file(source_dir / locale, dest_dir / locale)
            if outcome.copied:
                report.locales.append(locale)
            else:
                self._warn(report, f"Default locale file not found: {outcome.message}")
            return

        try:
            copy_tree_overwrite(source_dir, dest_dir)
        except shutil.Error as e:
            # copytree copies everything it can before raising
            for source, _dest, reason in e.args[0]:
                self._warn(report, f"Failed to copy locale file {source}: {reason}")
        report.locales.extend(
            sorted(str(p.relative_to(dest_dir)) for p in dest_dir.rglob("*") if p.is_file())
        )

    def _ensure_dir(self, directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MaterializationError(f"Cannot create directory {directory}: {e}") from e

    def _report(self, report: MaterializeReport, outcome: CopyOutcome, warning: str) -> None:
        if outcome.copied:
            report.copied.append(outcome.name)
        else:
            self._warn(report, f"{warning}: {outcome.message}")

    def _warn(self, report: MaterializeReport, message: str) -> None:
        report.warnings.append(message)
        print(f"Warning: {message}")
