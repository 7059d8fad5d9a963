"""Literal, whole-tree substitution of one module identifier for another."""

from __future__ import annotations

import os
from pathlib import Path

from goi.errors import FileRewriteError


def _raise_walk_error(exc: OSError) -> None:
    path = Path(exc.filename) if exc.filename else None
    raise FileRewriteError(f"failed to read directory {path}: {exc}", path=path) from exc


def rewrite_tree(
    root: str | Path,
    old_token: str,
    new_token: str,
    suffix: str = ".go",
) -> list[Path]:
    """Replace every occurrence of *old_token* with *new_token* under *root*.

    Only regular files whose name ends with *suffix* are touched; everything
    else is just traversed.  The replacement is a plain substring replace on
    the file's bytes, and a file is written back only if its content changed.

    The walk stops at the first file that cannot be read or written and
    raises :class:`FileRewriteError` for it.  Files rewritten before that
    point stay rewritten.

    Returns:
        The files that were rewritten, in traversal order.
    """
    if not old_token:
        raise ValueError("old_token must not be empty")

    old = old_token.encode("utf-8")
    new = new_token.encode("utf-8")
    rewritten: list[Path] = []

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        for filename in filenames:
            if not filename.endswith(suffix):
                continue
            path = Path(dirpath) / filename
            if not path.is_file():
                continue

            try:
                data = path.read_bytes()
            except OSError as exc:
                raise FileRewriteError(f"failed to read file {path}: {exc}", path=path) from exc

            updated = data.replace(old, new)
            if updated == data:
                continue

            try:
                path.write_bytes(updated)
            except OSError as exc:
                raise FileRewriteError(f"failed to write file {path}: {exc}", path=path) from exc
            rewritten.append(path)

    return rewritten
