"""
Unit tests for CargoBuildInvoker.

Cargo itself is never run; subprocess.run is patched.
"""

import os
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from cefbundle.build.build_invoker import CargoBuildInvoker, append_search_path
from cefbundle.errors import ExecutableNotFoundError
from cefbundle.packages.source_locator import SourceRoot


@pytest.fixture
def source_root(tmp_path):
    cef = tmp_path / "cef"
    return SourceRoot(cef_path=cef, bin_dir=cef / "Release")


class TestAppendSearchPath:
    """Tests for append_search_path."""

    def test_appends_to_existing(self):
        env = {"PATH": "/usr/bin"}
        append_search_path(env, "PATH", Path("/opt/cef"))
        assert env["PATH"] == f"/usr/bin{os.pathsep}{Path('/opt/cef')}"

    def test_unset_variable(self):
        env = {}
        append_search_path(env, "LD_LIBRARY_PATH", Path("/opt/cef"))
        assert env["LD_LIBRARY_PATH"] == str(Path("/opt/cef"))


class TestCargoBuildInvoker:
    """Test suite for CargoBuildInvoker."""

    def test_build_command(self):
        invoker = CargoBuildInvoker()
        assert invoker.build_command("cefsimple", "release") == [
            "cargo", "build", "--profile", "release", "--example", "cefsimple"
        ]

    def test_build_env_does_not_mutate_base(self, source_root):
        """Test the injected variables only exist in the returned copy."""
        base = {"PATH": "/usr/bin", "OTHER": "1"}
        with patch("cefbundle.packages.platform_utils.platform.system", return_value="Linux"):
            env = CargoBuildInvoker().build_env(source_root, base_env=base)

        assert base == {"PATH": "/usr/bin", "OTHER": "1"}
        assert env["OTHER"] == "1"
        assert env["CEF_PATH"] == str(source_root.cef_path)
        assert env["PATH"] == f"/usr/bin{os.pathsep}{source_root.bin_dir}"
        assert env["LD_LIBRARY_PATH"] == str(source_root.bin_dir)

    def test_build_env_windows_only_path(self, source_root):
        base = {"PATH": "C:/Windows"}
        with patch("cefbundle.packages.platform_utils.platform.system", return_value="Windows"):
            env = CargoBuildInvoker().build_env(source_root, base_env=base)

        assert env["PATH"] == f"C:/Windows{os.pathsep}{source_root.bin_dir}"
        assert "LD_LIBRARY_PATH" not in env
        assert "DYLD_FALLBACK_LIBRARY_PATH" not in env

    def test_build_env_keeps_process_environment(self, source_root, monkeypatch):
        """Test that building the child environment leaves os.environ alone."""
        monkeypatch.delenv("CEF_PATH", raising=False)
        before = dict(os.environ)

        env = CargoBuildInvoker().build_env(source_root)

        assert dict(os.environ) == before
        assert "CEF_PATH" not in os.environ
        assert env["CEF_PATH"] == str(source_root.cef_path)

    def test_build_success(self, source_root, tmp_path):
        invoker = CargoBuildInvoker(show_progress=False)
        with patch("cefbundle.build.build_invoker.subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0)
            result = invoker.build("cefsimple", "release", source_root, cwd=tmp_path)

        assert result.success is True
        assert result.exit_code == 0
        assert result.command == invoker.build_command("cefsimple", "release")

        args, kwargs = mock_run.call_args
        assert args[0] == ["cargo", "build", "--profile", "release", "--example", "cefsimple"]
        assert kwargs["cwd"] == tmp_path
        assert kwargs["env"]["CEF_PATH"] == str(source_root.cef_path)

    def test_build_failure_keeps_exit_code(self, source_root):
        """Test that cargo's exit code is reported unchanged."""
        invoker = CargoBuildInvoker(show_progress=False)
        with patch("cefbundle.build.build_invoker.subprocess.run", return_value=Mock(returncode=101)):
            result = invoker.build("cefsimple", "release", source_root)

        assert result.success is False
        assert result.exit_code == 101
        assert "101" in result.message

    def test_cargo_missing(self, source_root):
        invoker = CargoBuildInvoker(cargo="cargo-does-not-exist", show_progress=False)
        with patch("cefbundle.build.build_invoker.subprocess.run", side_effect=FileNotFoundError()):
            result = invoker.build("cefsimple", "release", source_root)

        assert result.success is False
        assert result.exit_code == 1
        assert "cargo-does-not-exist" in result.message

    def test_build_prints_command(self, source_root, capsys):
        invoker = CargoBuildInvoker()
        with patch("cefbundle.build.build_invoker.subprocess.run", return_value=Mock(returncode=0)):
            invoker.build("demo", "dev", source_root)

        out = capsys.readouterr().out
        assert "Building example 'demo' with profile 'dev'" in out
        assert "cargo build --profile dev --example demo" in out


class TestVerifyExecutable:
    """Tests for the post-build executable check."""

    def test_found(self, tmp_path):
        with patch("cefbundle.packages.platform_utils.platform.system", return_value="Linux"):
            (tmp_path / "demo").write_bytes(b"\x7fELF")
            assert CargoBuildInvoker.verify_executable(tmp_path, "demo") == tmp_path / "demo"

    def test_windows_suffix(self, tmp_path):
        (tmp_path / "demo.exe").write_bytes(b"MZ")
        with patch("cefbundle.packages.platform_utils.platform.system", return_value="Windows"):
            assert CargoBuildInvoker.verify_executable(tmp_path, "demo") == tmp_path / "demo.exe"

    def test_missing(self, tmp_path):
        """Test a successful build without its executable is a distinct error."""
        with patch("cefbundle.packages.platform_utils.platform.system", return_value="Linux"):
            with pytest.raises(ExecutableNotFoundError, match="failed silently"):
                CargoBuildInvoker.verify_executable(tmp_path, "demo")

    def test_directory_is_not_executable(self, tmp_path):
        (tmp_path / "demo").mkdir()
        with patch("cefbundle.packages.platform_utils.platform.system", return_value="Linux"):
            with pytest.raises(ExecutableNotFoundError):
                CargoBuildInvoker.verify_executable(tmp_path, "demo")
