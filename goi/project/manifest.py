"""Rewrite the module line of a freshly cloned ``go.mod``."""

from __future__ import annotations

from pathlib import Path

from goi.errors import ManifestRewriteError
from goi.scaffolder.module import MODULE_KEYWORD, find_module_line


def derive_module_path(project_name: str) -> str:
    """Module identifier for *project_name*: hyphens become ``/``, then lower-cased.

    ``"my-app"`` -> ``"my/app"``; ``"Shop"`` -> ``"shop"``.
    """
    return project_name.replace("-", "/").lower()


def rewrite_module_line(
    manifest: Path,
    new_module: str,
    keyword: str = MODULE_KEYWORD,
) -> str:
    """Point the first *keyword* line of *manifest* at *new_module*.

    Every other byte of the file is preserved, including a ``\\r`` ending on
    the rewritten line.

    Returns:
        The identifier the line declared before the rewrite.

    Raises:
        ManifestRewriteError: The manifest cannot be read, decoded or
            written, or it has no module line.
    """
    try:
        text = manifest.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestRewriteError(
            f"failed to read {manifest.name} file: {exc}", path=manifest
        ) from exc

    lines = text.split("\n")
    index = find_module_line(lines, keyword)
    if index is None:
        raise ManifestRewriteError(
            f"no module declaration found in {manifest}", path=manifest
        )

    line = lines[index]
    ending = "\r" if line.endswith("\r") else ""
    previous = line[len(keyword):len(line) - len(ending)]
    lines[index] = f"{keyword}{new_module}{ending}"

    try:
        manifest.write_bytes("\n".join(lines).encode("utf-8"))
    except OSError as exc:
        raise ManifestRewriteError(
            f"failed to write updated {manifest.name} file: {exc}", path=manifest
        ) from exc
    return previous
