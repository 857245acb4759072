"""Cargo build invocation.

Runs `cargo build --profile <profile> --example <name>` with the CEF runtime
made visible to the build: CEF_PATH points at the exported CEF directory and
the CEF binary directory is appended to the loader search path. These
variables are set on a copy of the environment passed to the child process
only; the calling process's environment is never modified.
"""

import os
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from ..errors import ExecutableNotFoundError
from ..packages.platform_utils import PlatformDetector
from ..packages.source_locator import SourceRoot


@dataclass
class BuildResult:
    """Result of a cargo build."""

    success: bool
    exit_code: int
    build_time: float
    command: List[str]
    message: str


def append_search_path(env: Dict[str, str], variable: str, entry: Path) -> None:
    """Append a directory to a path-list environment variable in `env`.

    The existing value is kept in front; an unset or empty variable becomes
    just `entry`.
    """
    current = env.get(variable, "")
    env[variable] = f"{current}{os.pathsep}{entry}" if current else str(entry)


class CargoBuildInvoker:
    """Runs cargo to build one example.

    Example usage:
        invoker = CargoBuildInvoker()
        result = invoker.build("cefsimple", "release", source_root, project_dir)
        if result.success:
            exe = invoker.verify_executable(build_output_dir, "cefsimple")
    """

    def __init__(self, cargo: str = "cargo", show_progress: bool = True):
        """Initialize the build invoker.

        Args:
            cargo: cargo executable name or path
            show_progress: Print the command before running it
        """
        self.cargo = cargo
        self.show_progress = show_progress

    def build_command(self, example: str, profile: str) -> List[str]:
        return [self.cargo, "build", "--profile", profile, "--example", example]

    def build_env(
        self, source_root: SourceRoot, base_env: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        """Environment for the cargo child process.

        Args:
            source_root: Resolved CEF runtime location
            base_env: Environment to start from (default: os.environ)

        Returns:
            New environment dictionary; `base_env` is left untouched
        """
        env = dict(os.environ if base_env is None else base_env)
        env["CEF_PATH"] = str(source_root.cef_path)
        append_search_path(env, "PATH", source_root.bin_dir)

        library_var = PlatformDetector.library_path_variable()
        if library_var != "PATH":
            append_search_path(env, library_var, source_root.bin_dir)
        return env

    def build(
        self,
        example: str,
        profile: str,
        source_root: SourceRoot,
        cwd: Optional[Path] = None,
    ) -> BuildResult:
        """Build an example. Output is streamed straight to the console.

        Args:
            example: Example name
            profile: Cargo profile
            source_root: Resolved CEF runtime location
            cwd: Directory to run cargo in (the crate root)

        Returns:
            BuildResult with cargo's exit code
        """
        cmd = self.build_command(example, profile)
        env = self.build_env(source_root)

        if self.show_progress:
            print(f"Building example '{example}' with profile '{profile}'...")
            print(f"  $ {' '.join(cmd)}")

        start_time = time.time()
        try:
            result = subprocess.run(cmd, cwd=cwd, env=env)
        except FileNotFoundError:
            return BuildResult(
                success=False,
                exit_code=1,
                build_time=time.time() - start_time,
                command=cmd,
                message=f"'{self.cargo}' not found. Install Rust from https://rustup.rs",
            )

        build_time = time.time() - start_time
        if result.returncode != 0:
            return BuildResult(
                success=False,
                exit_code=result.returncode,
                build_time=build_time,
                command=cmd,
                message=f"Cargo build failed with exit code {result.returncode}",
            )

        return BuildResult(
            success=True,
            exit_code=0,
            build_time=build_time,
            command=cmd,
            message="Build successful",
        )

    @staticmethod
    def verify_executable(build_output_dir: Path, example: str) -> Path:
        """Check that the build produced the example's executable.

        Args:
            build_output_dir: Directory cargo writes examples to
            example: Example name

        Returns:
            Path to the executable

        Raises:
            ExecutableNotFoundError: If the executable does not exist
        """
        exe_path = build_output_dir / PlatformDetector.executable_name(example)
        if not exe_path.is_file():
            raise ExecutableNotFoundError(
                f"Executable not found after build at {exe_path}. "
                + "Build might have failed silently or output is elsewhere."
            )
        return exe_path
