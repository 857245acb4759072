"""
Build system components for cefbundle.

This module provides the bundling pipeline including:
- cargo invocation with the CEF runtime on the search path
- Runtime dependency copying into the build output directory
- Pipeline orchestration and summary reporting
"""

from .build_invoker import BuildResult, CargoBuildInvoker
from .materializer import CopyOutcome, DependencyMaterializer, MaterializeReport
from .orchestrator import BundleOrchestrator, BundleResult

__all__ = [
    "CargoBuildInvoker",
    "BuildResult",
    "DependencyMaterializer",
    "MaterializeReport",
    "CopyOutcome",
    "BundleOrchestrator",
    "BundleResult",
]
