"""
Bundle orchestration for cefbundle.

This module runs the complete packaging pipeline for one example, strictly in
order and without retries:

1. Locate the exported CEF runtime (fatal if missing)
2. Build the example with cargo (fatal on failure, exit code propagated)
3. Verify the executable exists (fatal if not)
4. Copy CEF runtime files into the build output directory (per-file warnings)
5. Relocate the build output directory into the final output directory
6. Optionally compress allow-listed binaries with UPX (never fatal)
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config.options import ResolvedConfig
from ..deploy.compressor import CompressionResult, UpxCompressor
from ..deploy.relocator import RelocationReport, Relocator
from ..errors import BuildError
from ..packages.source_locator import SourceLocator, SourceRoot
from .build_invoker import CargoBuildInvoker
from .materializer import DependencyMaterializer, MaterializeReport


@dataclass
class BundleResult:
    """Result of a complete bundling run."""

    final_output_dir: Path
    executable_path: Path
    source_root: SourceRoot
    materialize_report: MaterializeReport
    relocation_report: RelocationReport
    compression_results: Optional[List[CompressionResult]] = None
    build_time: float = 0.0
    total_time: float = 0.0
    warnings: List[str] = field(default_factory=list)


class BundleOrchestrator:
    """
    Orchestrates build, dependency copy and relocation for one example.

    Example usage:
        orchestrator = BundleOrchestrator(verbose=True)
        result = orchestrator.run(config)
        print(f"Bundle: {result.final_output_dir}")

    Fatal conditions are raised as BundleError subclasses; everything
    non-fatal is collected in the returned BundleResult.
    """

    def __init__(
        self,
        source_locator: Optional[SourceLocator] = None,
        build_invoker: Optional[CargoBuildInvoker] = None,
        materializer: Optional[DependencyMaterializer] = None,
        relocator: Optional[Relocator] = None,
        compressor: Optional[UpxCompressor] = None,
        verbose: bool = False,
    ):
        """
        Initialize the orchestrator. Any stage not given uses its default.

        Args:
            source_locator: Finds the CEF runtime directory
            build_invoker: Runs cargo
            materializer: Copies runtime files
            relocator: Moves the bundle to its final location
            compressor: Compresses binaries with UPX
            verbose: Enable verbose output
        """
        self.verbose = verbose
        self.source_locator = source_locator or SourceLocator(show_progress=True)
        self.build_invoker = build_invoker or CargoBuildInvoker(show_progress=True)
        self.materializer = materializer or DependencyMaterializer(show_progress=True)
        self.relocator = relocator or Relocator(show_progress=True)
        self.compressor = compressor or UpxCompressor(show_progress=verbose)

    def run(self, config: ResolvedConfig) -> BundleResult:
        """
        Execute the bundling pipeline.

        Args:
            config: Resolved configuration

        Returns:
            BundleResult

        Raises:
            SourceRootError: If the CEF runtime directory is missing
            BuildError: If cargo fails
            ExecutableNotFoundError: If cargo succeeded without producing the executable
            MaterializationError: If the build output directory cannot be created
            RelocationError: If the final output directory cannot be prepared
        """
        start_time = time.time()
        toggles = config.toggles

        if self.verbose:
            print(f"Using example: {config.example}")
            print(f"Using profile: {config.profile}")
            print(f"Size optimizations: skip_pdb={toggles.skip_pdb}, "
                  f"min_locales={toggles.min_locales}, "
                  f"include_dx_compiler={toggles.include_dx_compiler}, "
                  f"use_upx={toggles.use_upx}")
            print(f"Build output directory: {config.build_output_dir}")
            print(f"Final output directory: {config.final_output_dir}")
            print()

        # Phase 1: CEF runtime location
        if self.verbose:
            print("[1/5] Locating CEF runtime...")
        source_root = self.source_locator.locate()

        # Phase 2: cargo build
        if self.verbose:
            print("[2/5] Building example...")
        build_result = self.build_invoker.build(
            config.example, config.profile, source_root, cwd=config.project_dir
        )
        if not build_result.success:
            raise BuildError(build_result.message, exit_code=build_result.exit_code)
        executable_path = self.build_invoker.verify_executable(
            config.build_output_dir, config.example
        )
        print(f"Build successful: {executable_path}")

        # Phase 3: runtime dependencies
        if self.verbose:
            print("[3/5] Copying CEF runtime dependencies...")
        materialize_report = self.materializer.materialize(
            bin_dir=source_root.bin_dir,
            build_output_dir=config.build_output_dir,
            example=config.example,
            project_dir=config.project_dir,
            toggles=toggles,
        )

        # Phase 4: relocation
        if self.verbose:
            print("[4/5] Relocating bundle...")
        relocation_report = self.relocator.relocate(
            config.build_output_dir,
            config.final_output_dir,
            skip_debug_symbols=toggles.skip_pdb,
        )

        # Phase 5: compression
        compression_results = None
        if toggles.use_upx:
            if self.verbose:
                print("[5/5] Compressing binaries...")
            compression_results = self.compressor.compress_bundle(config.final_output_dir)
        elif self.verbose:
            print("[5/5] Compression disabled")

        warnings = list(materialize_report.warnings)
        if toggles.use_upx and compression_results is None:
            warnings.append("UPX not found; binaries were not compressed")
        for result in compression_results or []:
            if result.status == "failed":
                warnings.append(f"Failed to compress {result.name}: {result.message}")

        return BundleResult(
            final_output_dir=config.final_output_dir,
            executable_path=config.final_output_dir / executable_path.name,
            source_root=source_root,
            materialize_report=materialize_report,
            relocation_report=relocation_report,
            compression_results=compression_results,
            build_time=build_result.build_time,
            total_time=time.time() - start_time,
            warnings=warnings,
        )
