"""
Option resolution for cefbundle.

This module turns raw option values (command line, cefbundle.ini) into a single
immutable ResolvedConfig. Each logical option has one canonical name and a set
of accepted spellings on the command line; values are merged with a fixed
precedence:

    command line  >  cefbundle.ini [example:<name>]  >  cefbundle.ini [cefbundle]  >  defaults

All paths are resolved to absolute paths once, here, and never recomputed.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..errors import ConfigurationError
from .ini_parser import BundleIniConfig

TRUE_VALUES = {"true", "1", "yes", "on", "y"}
FALSE_VALUES = {"false", "0", "no", "off", "n"}


# Canonical option name -> accepted command-line spellings (short flag first).
OPTION_ALIASES: Dict[str, Tuple[str, ...]] = {
    "example": ("-e", "--example", "-ExampleName", "--ExampleName"),
    "profile": ("-p", "--profile", "-Profile", "--Profile"),
    "cargo_target_dir": (
        "-c",
        "--cargo-target-dir",
        "--cargoTargetDir",
        "-CargoTargetDir",
        "--CargoTargetDir",
    ),
    "final_output_dir": (
        "-f",
        "--final-output-dir",
        "--finalOutputDir",
        "-FinalOutputDir",
        "--FinalOutputDir",
    ),
    "skip_pdb": ("-s", "--skip-pdb", "--skipPdb", "-SkipPdb", "--SkipPdb"),
    "min_locales": ("-m", "--min-locales", "--minLocales", "-MinLocales", "--MinLocales"),
    "include_dx_compiler": (
        "-d",
        "--include-dx-compiler",
        "--includeDxCompiler",
        "-IncludeDxCompiler",
        "--IncludeDxCompiler",
    ),
    "use_upx": ("-u", "--use-upx", "--useUpx", "-UseUpx", "--UseUpx"),
}

BOOLEAN_OPTIONS = ("skip_pdb", "min_locales", "include_dx_compiler", "use_upx")

DEFAULTS: Dict[str, Any] = {
    "example": None,
    "profile": "release",
    "cargo_target_dir": "target",
    "final_output_dir": "../../cef",
    "skip_pdb": True,
    "min_locales": True,
    "include_dx_compiler": False,
    "use_upx": False,
}

# cargo writes the "dev" profile to target/debug
PROFILE_DIR_NAMES = {"dev": "debug"}


def parse_bool(value: Any) -> bool:
    """Parse a boolean option value.

    Args:
        value: A bool, or a string such as "true", "false", "1", "off"

    Returns:
        Parsed boolean

    Raises:
        ValueError: If the value is not a recognized boolean spelling
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass(frozen=True)
class BundleToggles:
    """Size and packaging switches applied while assembling a bundle."""

    skip_pdb: bool = True
    min_locales: bool = True
    include_dx_compiler: bool = False
    use_upx: bool = False


@dataclass(frozen=True)
class ResolvedConfig:
    """Fully resolved bundling configuration.

    Attributes:
        example: Name of the cargo example to build and bundle
        project_dir: Directory relative paths are resolved against
        profile: Cargo build profile
        cargo_target_dir: Absolute cargo target directory
        final_output_dir: Absolute directory receiving the finished bundle
        toggles: Size/packaging switches
        verbose: Verbose console output
    """

    example: str
    project_dir: Path
    cargo_target_dir: Path
    final_output_dir: Path
    profile: str = "release"
    toggles: BundleToggles = field(default_factory=BundleToggles)
    verbose: bool = False

    @property
    def build_output_dir(self) -> Path:
        """Directory cargo writes example binaries to for this profile."""
        profile_dir = PROFILE_DIR_NAMES.get(self.profile, self.profile)
        return self.cargo_target_dir / profile_dir / "examples"


def resolve_config(
    cli_values: Dict[str, Any],
    project_dir: Optional[Path] = None,
    ini_config: Optional[BundleIniConfig] = None,
    verbose: bool = False,
) -> ResolvedConfig:
    """Merge option layers into a ResolvedConfig.

    Args:
        cli_values: Canonical option name -> value given on the command line
            (None or absent means "not given")
        project_dir: Base directory for relative paths (default: cwd)
        ini_config: Parsed cefbundle.ini, if any
        verbose: Verbose console output

    Returns:
        ResolvedConfig

    Raises:
        ConfigurationError: If the example is missing or a value is invalid
    """
    project_dir = Path(project_dir if project_dir is not None else Path.cwd()).resolve()

    cli_example = cli_values.get("example")
    example_hint = cli_example if cli_example else None

    values: Dict[str, Any] = dict(DEFAULTS)
    if ini_config is not None:
        values.update(ini_config.get_options(example_hint))
    for name, value in cli_values.items():
        if name not in DEFAULTS:
            raise ConfigurationError(f"Unknown option: {name}")
        if value is not None:
            values[name] = value

    example = values["example"]
    if not example or not str(example).strip():
        raise ConfigurationError("Missing required argument: example")
    example = str(example).strip()

    # The INI may only name the example in its base section; re-read so the
    # matching [example:<name>] section still applies.
    if ini_config is not None and example_hint is None:
        ini_values = ini_config.get_options(example)
        for name, value in ini_values.items():
            if cli_values.get(name) is None:
                values[name] = value

    try:
        toggles = BundleToggles(**{name: parse_bool(values[name]) for name in BOOLEAN_OPTIONS})
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    profile = str(values["profile"]).strip()
    if not profile:
        raise ConfigurationError("Build profile must not be empty")

    return ResolvedConfig(
        example=example,
        project_dir=project_dir,
        cargo_target_dir=(project_dir / str(values["cargo_target_dir"])).resolve(),
        final_output_dir=(project_dir / str(values["final_output_dir"])).resolve(),
        profile=profile,
        toggles=toggles,
        verbose=verbose,
    )
