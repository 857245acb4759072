"""
cefbundle.ini configuration parser.

A project may keep its preferred bundling options in a cefbundle.ini next to
its Cargo.toml instead of repeating them on every invocation. Command-line
values always win over anything read here.

Example cefbundle.ini:
    [cefbundle]
    example = cefsimple
    final_output_dir = dist/cef
    use_upx = true

    [example:cefsimple]
    min_locales = false
"""

import configparser
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import ConfigurationError

INI_FILENAME = "cefbundle.ini"
BASE_SECTION = "cefbundle"
EXAMPLE_SECTION_PREFIX = "example:"

KNOWN_KEYS = {
    "example",
    "profile",
    "cargo_target_dir",
    "final_output_dir",
    "skip_pdb",
    "min_locales",
    "include_dx_compiler",
    "use_upx",
}


class BundleIniConfigError(ConfigurationError):
    """Exception raised for cefbundle.ini configuration errors."""

    pass


class BundleIniConfig:
    """
    Parser for cefbundle.ini files.

    The [cefbundle] section holds project-wide defaults. An [example:<name>]
    section overrides them for one example only. Keys may be written with
    underscores or dashes (skip_pdb / skip-pdb).

    Usage:
        config = BundleIniConfig(Path("cefbundle.ini"))
        options = config.get_options("cefsimple")
    """

    def __init__(self, ini_path: Path):
        """
        Initialize the parser with a cefbundle.ini file.

        Args:
            ini_path: Path to the cefbundle.ini file

        Raises:
            BundleIniConfigError: If the file doesn't exist or cannot be parsed
        """
        self.ini_path = ini_path

        if not ini_path.exists():
            raise BundleIniConfigError(f"Configuration file not found: {ini_path}")

        self.config = configparser.ConfigParser(interpolation=None)

        try:
            self.config.read(ini_path, encoding="utf-8")
        except configparser.Error as e:
            raise BundleIniConfigError(f"Failed to parse {ini_path}: {e}") from e

    @classmethod
    def load(cls, project_dir: Path) -> Optional["BundleIniConfig"]:
        """Load cefbundle.ini from a project directory if present.

        Args:
            project_dir: Directory that may contain cefbundle.ini

        Returns:
            Parsed config, or None when the project has no cefbundle.ini
        """
        ini_path = Path(project_dir) / INI_FILENAME
        if not ini_path.is_file():
            return None
        return cls(ini_path)

    def get_examples(self) -> List[str]:
        """Names of all examples with a dedicated section."""
        return [
            section[len(EXAMPLE_SECTION_PREFIX):]
            for section in self.config.sections()
            if section.startswith(EXAMPLE_SECTION_PREFIX)
        ]

    def get_options(self, example: Optional[str] = None) -> Dict[str, str]:
        """
        Get the option values configured for an example.

        Args:
            example: Example name whose section overrides the base section

        Returns:
            Canonical option name -> raw string value

        Raises:
            BundleIniConfigError: If a section contains an unknown key
        """
        options = self._read_section(BASE_SECTION)
        if example:
            options.update(self._read_section(f"{EXAMPLE_SECTION_PREFIX}{example}"))
        return options

    def _read_section(self, section: str) -> Dict[str, str]:
        if section not in self.config:
            return {}

        values = {}
        for key, value in self.config[section].items():
            name = key.strip().replace("-", "_")
            if name not in KNOWN_KEYS:
                raise BundleIniConfigError(
                    f"Unknown key '{key}' in [{section}] of {self.ini_path}. "
                    + f"Known keys: {', '.join(sorted(KNOWN_KEYS))}"
                )
            values[name] = value.strip()
        return values
