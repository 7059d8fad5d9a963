"""Exception hierarchy for goi.

Every goi exception inherits from :class:`GoiError`, so the CLI can report
any failure with a single ``except`` clause while callers can still handle
specific failure modes.  Errors are raised with ``raise ... from exc`` so the
underlying OS or subprocess error stays attached as ``__cause__``.  Nothing is
retried and nothing is rolled back.
"""

from __future__ import annotations

from pathlib import Path


class GoiError(Exception):
    """Base exception for all goi errors."""


class UnknownKindError(GoiError):
    """Raised when an artifact kind is not in the template catalog."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"unknown resource type: {kind}")


class ModuleIdentityError(GoiError):
    """Raised when the project's module identifier cannot be determined."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ManifestReadError(ModuleIdentityError):
    """Raised when the manifest file cannot be read."""


class ModuleDeclarationNotFoundError(ModuleIdentityError):
    """Raised when the manifest has no module declaration line."""


class TemplateMissingError(GoiError):
    """Raised when catalog templates are absent from the template directory."""

    def __init__(self, names: list[str], template_dir: Path) -> None:
        self.names = names
        self.template_dir = template_dir
        super().__init__(
            f"templates missing from {template_dir}: {', '.join(names)}"
        )


class ManifestRewriteError(GoiError):
    """Raised when the manifest's module line cannot be rewritten."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class TargetNotEmptyError(GoiError):
    """Raised when the project target directory exists and has entries."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"target directory '{path}' already exists and is not empty, "
            "please specify an empty or non-existent directory"
        )


class CloneError(GoiError):
    """Raised when the template repository cannot be cloned."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message)


class ScaffoldIOError(GoiError):
    """Raised when a directory or file cannot be created, read or written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class FileRewriteError(ScaffoldIOError):
    """Raised when the tree rewrite fails on a single file."""


class ProjectNotFoundError(GoiError):
    """Raised when a named project directory does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"project directory '{path}' does not exist")


class ReleaseCheckError(GoiError):
    """Raised when the latest release cannot be looked up."""
