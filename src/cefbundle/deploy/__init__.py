"""
Deployment of assembled bundles for cefbundle.

This module moves the assembled bundle to its final location and optionally
compresses its largest binaries.
"""

from .compressor import COMPRESSIBLE_BINARIES, CompressionResult, UpxCompressor
from .relocator import DEBUG_SYMBOL_SUFFIX, RelocationReport, Relocator, is_debug_symbol_file

__all__ = [
    "Relocator",
    "RelocationReport",
    "is_debug_symbol_file",
    "DEBUG_SYMBOL_SUFFIX",
    "UpxCompressor",
    "CompressionResult",
    "COMPRESSIBLE_BINARIES",
]
