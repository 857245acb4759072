"""Platform Detection Utilities.

This module answers the few platform questions the bundler needs:
executable naming, where the user's home directory is, which environment
variable the dynamic loader searches, and how to probe the command path.

Supported Platforms:
    - Windows: .exe executables, USERPROFILE home, PATH library search, `where`
    - Linux: LD_LIBRARY_PATH library search, `which`
    - macOS: DYLD_FALLBACK_LIBRARY_PATH library search, `which`
"""

import os
import platform
from pathlib import Path
from typing import Mapping, Optional


class PlatformDetector:
    """Detects platform conventions for executables and library lookup."""

    @staticmethod
    def system() -> str:
        """Lower-case operating system name ('windows', 'linux', 'darwin')."""
        return platform.system().lower()

    @staticmethod
    def is_windows() -> bool:
        return PlatformDetector.system() == "windows"

    @staticmethod
    def executable_suffix() -> str:
        """File suffix cargo gives executables on this platform."""
        return ".exe" if PlatformDetector.is_windows() else ""

    @staticmethod
    def executable_name(name: str) -> str:
        """Platform-specific file name for an executable called `name`."""
        return f"{name}{PlatformDetector.executable_suffix()}"

    @staticmethod
    def which_command() -> str:
        """Command used to check whether a tool is on the search path."""
        return "where" if PlatformDetector.is_windows() else "which"

    @staticmethod
    def library_path_variable() -> str:
        """Environment variable the dynamic loader searches for shared libraries.

        Returns:
            'PATH' on Windows, 'DYLD_FALLBACK_LIBRARY_PATH' on macOS,
            'LD_LIBRARY_PATH' elsewhere
        """
        system = PlatformDetector.system()
        if system == "windows":
            return "PATH"
        if system == "darwin":
            return "DYLD_FALLBACK_LIBRARY_PATH"
        return "LD_LIBRARY_PATH"

    @staticmethod
    def home_dir(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
        """Resolve the user's home directory from the environment.

        HOME is checked first, then USERPROFILE (Windows).

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            Home directory, or None if neither variable is set
        """
        env = os.environ if environ is None else environ
        for var in ("HOME", "USERPROFILE"):
            value = env.get(var)
            if value:
                return Path(value)
        return None
