"""cefbundle - post-build packager for CEF-based Rust examples.

Builds an example with cargo, copies the CEF runtime next to the produced
executable and relocates the finished bundle to its final output directory.
"""

__version__ = "0.1.0"
