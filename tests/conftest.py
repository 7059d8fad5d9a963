"""Shared pytest fixtures for the goi test suite.

Provides reusable fixtures for:
- Go projects with a ``go.mod`` manifest
- An in-memory copy of the project template and a fake cloner for it
- A real local git repository holding the template (integration tests)
- Mock subprocess helpers
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from goi.errors import CloneError


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_goi_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GOI_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("GOI_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Go projects
# ---------------------------------------------------------------------------

GO_MOD = "module demo/app\n\ngo 1.22\n\nrequire github.com/gin-gonic/gin v1.10.0\n"


@pytest.fixture
def go_project(tmp_path: Path) -> Path:
    """A project root containing ``go.mod`` declaring ``demo/app``."""
    project = tmp_path / "app"
    project.mkdir()
    (project / "go.mod").write_text(GO_MOD, encoding="utf-8")
    return project


# ---------------------------------------------------------------------------
# Project template
# ---------------------------------------------------------------------------

TEMPLATE_FILES: dict[str, str] = {
    "go.mod": "module go-project\n\ngo 1.22\n\nrequire gorm.io/gorm v1.25.0\n",
    "README.md": "# go-project\n\nRun `go run cmd/api/main.go`.\n",
    "cmd/api/main.go": (
        "package main\n\n"
        "import (\n"
        '\t"go-project/config"\n'
        '\t"go-project/routes"\n'
        ")\n\n"
        "func main() {\n"
        "\tcfg := config.Load()\n"
        "\troutes.Setup(cfg).Run()\n"
        "}\n"
    ),
    "config/config.go": "package config\n\ntype Config struct{ Port string }\n\nfunc Load() Config { return Config{Port: \"9090\"} }\n",
    "routes/routes.go": (
        "package routes\n\n"
        "import (\n"
        '\t"go-project/config"\n'
        '\t"go-project/handlers"\n'
        ")\n"
    ),
    "handlers/health.go": "package handlers\n\n// Health reports liveness.\nfunc Health() string { return \"ok\" }\n",
    "docs/notes.txt": "imports use go-project/...\n",
}


def write_tree(root: Path, files: dict[str, str]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


class FakeCloner:
    """Stands in for GitCloner: "clones" TEMPLATE_FILES into the target."""

    def __init__(
        self,
        files: dict[str, str] | None = None,
        available: bool = True,
        fail: bool = False,
    ) -> None:
        self.files = TEMPLATE_FILES if files is None else files
        self.available = available
        self.fail = fail
        self.calls: list[tuple[str, Path]] = []

    def ensure_available(self) -> None:
        if not self.available:
            raise CloneError("git is not installed, please install git to clone the project")

    async def clone(self, url: str, target: Path) -> None:
        self.calls.append((url, target))
        if self.fail:
            raise CloneError("failed to clone repository (exit 128)", stderr="fatal: repository not found")
        write_tree(target, self.files)


@pytest.fixture
def template_files() -> dict[str, str]:
    """Relative path -> content of the template checkout."""
    return dict(TEMPLATE_FILES)


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """A directory holding an uncommitted copy of the template checkout."""
    root = tmp_path / "proj"
    write_tree(root, TEMPLATE_FILES)
    return root


@pytest.fixture
def fake_cloner() -> FakeCloner:
    return FakeCloner()


@pytest.fixture
def cloner_factory():
    """Build a FakeCloner with custom files or failure modes."""
    return FakeCloner


@pytest.fixture
def template_repo(tmp_path: Path) -> Path:
    """A real git repository holding TEMPLATE_FILES with one commit."""
    repo_dir = tmp_path / "go-project"
    repo_dir.mkdir()
    write_tree(repo_dir, TEMPLATE_FILES)

    def git(*args: str) -> None:
        subprocess.run(["git", *args], cwd=repo_dir, check=True, capture_output=True)

    git("init")
    git("config", "user.email", "test@goi.local")
    git("config", "user.name", "goi Test")
    git("config", "commit.gpgsign", "false")
    git("add", ".")
    git("commit", "-m", "Initial commit")
    return repo_dir


# ---------------------------------------------------------------------------
# Subprocess mocking
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
