"""Runtime dependency sources for cefbundle.

This module knows where the CEF runtime lives on this machine and which of
its files belong in a bundle.
"""

from .manifest import (
    DEFAULT_LOCALE,
    LOCALES_DIR,
    OPTIONAL_FILES,
    REQUIRED_FILES,
    DependencyManifest,
)
from .platform_utils import PlatformDetector
from .source_locator import EXPORT_COMMAND, SourceLocator, SourceRoot

__all__ = [
    "DependencyManifest",
    "REQUIRED_FILES",
    "OPTIONAL_FILES",
    "LOCALES_DIR",
    "DEFAULT_LOCALE",
    "PlatformDetector",
    "SourceLocator",
    "SourceRoot",
    "EXPORT_COMMAND",
]
