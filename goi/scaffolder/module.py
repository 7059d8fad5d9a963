"""Read the module identifier from a project's ``go.mod``."""

from __future__ import annotations

from pathlib import Path

from goi.errors import ManifestReadError, ModuleDeclarationNotFoundError

MANIFEST_FILENAME = "go.mod"
MODULE_KEYWORD = "module "


def find_module_line(lines: list[str], keyword: str = MODULE_KEYWORD) -> int | None:
    """Return the index of the first line starting with *keyword*, or ``None``."""
    for index, line in enumerate(lines):
        if line.startswith(keyword):
            return index
    return None


def resolve_module(
    project_root: str | Path,
    manifest_filename: str = MANIFEST_FILENAME,
    keyword: str = MODULE_KEYWORD,
) -> str:
    """Return the module identifier declared in ``<project_root>/go.mod``.

    The identifier is the remainder of the first line that starts with
    *keyword*, returned verbatim.  Later ``module`` lines are ignored.  The
    manifest is re-read on every call.

    Raises:
        ManifestReadError: If the manifest cannot be read.
        ModuleDeclarationNotFoundError: If no line starts with *keyword*.
    """
    manifest = Path(project_root) / manifest_filename
    try:
        text = manifest.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(
            f"failed to read {manifest_filename}: {exc}", path=manifest
        ) from exc

    lines = text.split("\n")
    index = find_module_line(lines, keyword)
    if index is None:
        raise ModuleDeclarationNotFoundError(
            f"module name not found in {manifest_filename}", path=manifest
        )
    return lines[index][len(keyword):]
