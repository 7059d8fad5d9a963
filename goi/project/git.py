"""Version-control collaborator: shallow-clones the project template.

Only success or failure of the clone is consumed by the materializer; git's
output is captured and attached to :class:`~goi.errors.CloneError`.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Protocol

from goi.errors import CloneError


class TemplateCloner(Protocol):
    """What :class:`~goi.project.materializer.ProjectMaterializer` needs from git."""

    def ensure_available(self) -> None: ...

    async def clone(self, url: str, target: Path) -> None: ...


async def _run_git(
    *args: str,
    cwd: str | Path | None = None,
    timeout: float = 300.0,
) -> tuple[str, str]:
    """Run a git command asynchronously and return (stdout, stderr).

    Raises CloneError if git cannot be started, times out, or exits non-zero.
    """
    cmd = ["git"] + list(args)
    cmd_str = " ".join(cmd)

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
        )
    except OSError as exc:
        raise CloneError(f"failed to start git: {exc}", command=cmd_str) from exc

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise CloneError(
            f"Git command timed out after {timeout}s: {cmd_str}",
            command=cmd_str,
        )

    stdout = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()

    if process.returncode != 0:
        raise CloneError(
            f"failed to clone repository (exit {process.returncode}): {cmd_str}\n{stderr}",
            command=cmd_str,
            stderr=stderr,
        )

    return stdout, stderr


class GitCloner:
    """Clones a repository with the ``git`` executable."""

    def __init__(self, depth: int = 1, timeout: float = 300.0) -> None:
        self.depth = depth
        self.timeout = timeout

    def ensure_available(self) -> None:
        """Raise :class:`CloneError` if ``git`` is not on ``PATH``."""
        if shutil.which("git") is None:
            raise CloneError("git is not installed, please install git to clone the project")

    async def clone(self, url: str, target: Path) -> None:
        """Shallow-clone *url* into *target* (which may be an existing empty dir)."""
        await _run_git(
            "clone",
            "--depth",
            str(self.depth),
            url,
            str(target),
            timeout=self.timeout,
        )
