"""Filesystem helpers shared by the materializer and the relocator.

Moves are implemented as copy-then-delete: the build directory and the final
output directory may live on different volumes, where os.rename() fails. A
source is only removed after its copy has completed.
"""

import shutil
from pathlib import Path


def copy_tree_overwrite(source: Path, dest: Path) -> None:
    """Recursively copy `source` into `dest`, overwriting existing files."""
    shutil.copytree(source, dest, dirs_exist_ok=True)


def remove_path(path: Path) -> bool:
    """Remove a file, symlink or directory tree.

    Returns:
        True if something was removed, False if the path did not exist
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        return False
    return True


def move_path(source: Path, dest: Path) -> None:
    """Move a file or directory by copying it and then deleting the source.

    Args:
        source: File or directory to move
        dest: Destination path (not its parent)
    """
    if source.is_symlink():
        remove_path(dest)
        shutil.copy2(source, dest, follow_symlinks=False)
        source.unlink()
    elif source.is_dir():
        copy_tree_overwrite(source, dest)
        shutil.rmtree(source)
    else:
        shutil.copy2(source, dest)
        source.unlink()


def directory_size(path: Path) -> int:
    """Total size in bytes of all files below `path`."""
    if path.is_file():
        return path.stat().st_size
    return sum(f.stat().st_size for f in path.rglob("*") if f.is_file())
