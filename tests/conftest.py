"""Shared fixtures for cefbundle tests."""

from pathlib import Path
from typing import Iterable

import pytest

from cefbundle.packages.manifest import REQUIRED_FILES


def write_files(directory: Path, names: Iterable[str]) -> None:
    """Create files whose content is their own name."""
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(f"content of {name}".encode("utf-8"))


def tree(directory: Path) -> list:
    """Sorted relative paths of all files below a directory."""
    return sorted(
        p.relative_to(directory).as_posix() for p in directory.rglob("*") if p.is_file()
    )


@pytest.fixture
def home_dir(tmp_path):
    """Fake home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def cef_dir(home_dir):
    """Exported CEF directory with the full runtime and two locales."""
    cef = home_dir / ".local" / "share" / "cef"
    write_files(cef, REQUIRED_FILES)
    write_files(cef / "locales", ["en-US.pak", "fr.pak"])
    return cef


@pytest.fixture
def project_dir(tmp_path):
    """Project directory holding the cargo target directory."""
    project = tmp_path / "workspace" / "crates" / "cef"
    project.mkdir(parents=True)
    return project


@pytest.fixture
def make_files():
    """Helper creating files whose content is their own name."""
    return write_files


@pytest.fixture
def list_tree():
    """Helper listing all files below a directory."""
    return tree
