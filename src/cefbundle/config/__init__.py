"""Configuration resolution for cefbundle."""

from .ini_parser import BundleIniConfig, BundleIniConfigError
from .options import (
    BOOLEAN_OPTIONS,
    DEFAULTS,
    OPTION_ALIASES,
    BundleToggles,
    ResolvedConfig,
    parse_bool,
    resolve_config,
)

__all__ = [
    "BundleIniConfig",
    "BundleIniConfigError",
    "BundleToggles",
    "ResolvedConfig",
    "resolve_config",
    "parse_bool",
    "OPTION_ALIASES",
    "BOOLEAN_OPTIONS",
    "DEFAULTS",
]
