"""Build utilities for cefbundle.

This module provides utility functions for reporting on a finished bundle.
"""

from pathlib import Path
from typing import List

from ..cli_utils import BannerFormatter
from ..fs_utils import directory_size
from .orchestrator import BundleResult


def format_size(size: int) -> str:
    """Human readable byte count (e.g. '1.50 MB')."""
    value = float(size)
    for unit in ("bytes", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{int(value)} bytes" if unit == "bytes" else f"{value:.2f} {unit}"
        value /= 1024
    return f"{value:.2f} GB"


class BundleSummaryPrinter:
    """Utility class for printing the end-of-run bundle summary."""

    @staticmethod
    def summary_lines(result: BundleResult) -> List[str]:
        relocation = result.relocation_report
        lines = [
            "BUNDLE COMPLETE",
            f"Output: {result.final_output_dir}",
            f"Executable: {result.executable_path.name}",
            f"Entries moved: {len(relocation.moved)}",
        ]
        if relocation.skipped:
            lines.append(f"Debug symbols left in build directory: {', '.join(relocation.skipped)}")
        if result.materialize_report.locales:
            lines.append(f"Locales: {len(result.materialize_report.locales)}")
        if result.warnings:
            lines.append(f"Warnings: {len(result.warnings)}")
        lines.append(f"Bundle size: {format_size(directory_size(Path(result.final_output_dir)))}")
        lines.append(f"Total time: {result.total_time:.2f}s")
        return lines

    @staticmethod
    def print_summary(result: BundleResult, verbose: bool = False) -> None:
        """
        Print the bundle summary banner.

        Args:
            result: Result of the bundling run
            verbose: Also list every file in the bundle
        """
        BannerFormatter.print_banner(
            "\n".join(BundleSummaryPrinter.summary_lines(result)), width=60, center=False
        )

        if verbose:
            print("\nBundle contents:")
            root = Path(result.final_output_dir)
            for f in sorted(p for p in root.rglob("*") if p.is_file()):
                print(f"  {f.relative_to(root)} ({format_size(f.stat().st_size)})")
