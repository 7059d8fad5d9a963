"""Helpers behind ``goi list``, ``goi remove`` and ``goi tree``."""

from __future__ import annotations

import shutil
from pathlib import Path

from rich.tree import Tree

from goi.errors import ProjectNotFoundError, ScaffoldIOError


def list_projects(base_dir: str | Path = ".", manifest_filename: str = "go.mod") -> list[str]:
    """Names of the immediate subdirectories of *base_dir* holding a manifest."""
    base = Path(base_dir)
    return sorted(
        entry.name
        for entry in base.iterdir()
        if entry.is_dir() and (entry / manifest_filename).is_file()
    )


def remove_project(project_name: str, base_dir: str | Path = ".") -> Path:
    """Delete the project directory *project_name* and everything in it.

    A symlink or a regular file under that name is unlinked; a symlinked
    directory's target is left alone.

    Raises:
        ProjectNotFoundError: Nothing exists under that name.
        ScaffoldIOError: Deletion failed part-way.
    """
    target = (Path(base_dir) / project_name).absolute()
    if not target.exists():
        raise ProjectNotFoundError(target)
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError as exc:
        raise ScaffoldIOError(
            f"failed to remove project directory '{target}': {exc}", path=target
        ) from exc
    return target


def _visible_entries(directory: Path) -> list[Path]:
    return sorted(
        (entry for entry in directory.iterdir() if not entry.name.startswith(".")),
        key=lambda entry: entry.name,
    )


def build_tree(root: str | Path = ".", dirs_only: bool = False) -> tuple[Tree, int, int]:
    """Build a Rich tree of *root*, skipping hidden entries.

    Symlinks are shown as leaves and counted as files, even when they point
    at a directory.

    Returns:
        ``(tree, directory_count, file_count)``; the root itself is not counted.
    """
    root_path = Path(root)
    tree = Tree(str(root))
    dirs = files = 0

    stack: list[tuple[Path, Tree]] = [(root_path, tree)]
    while stack:
        directory, node = stack.pop()
        for entry in _visible_entries(directory):
            if entry.is_dir() and not entry.is_symlink():
                dirs += 1
                stack.append((entry, node.add(entry.name)))
            elif not dirs_only:
                files += 1
                node.add(entry.name)

    return tree, dirs, files
