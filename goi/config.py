"""goi configuration.

Centralised, typed configuration for project creation and code generation.
Settings use Pydantic v2 models so they are validated at construction time
and can be serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE_URL = "https://github.com/toewailin/go-project.git"
DEFAULT_TEMPLATE_MODULE = "go-project"
DEFAULT_RELEASE_API_URL = "https://api.github.com/repos/toewailin/goi/releases/latest"


class Config(BaseModel):
    """Global goi configuration.

    Created once by the CLI entry point and passed by reference to the
    renderer and the materializer.
    """

    # Project template
    template_url: str = Field(default=DEFAULT_TEMPLATE_URL)
    template_module: str = Field(
        default=DEFAULT_TEMPLATE_MODULE,
        min_length=1,
        description="Module string the template repository ships with",
    )
    clone_depth: int = Field(default=1, ge=1)
    git_timeout: int = Field(default=300, ge=1, description="git clone timeout in seconds")

    # Go conventions
    manifest_filename: str = Field(default="go.mod")
    module_keyword: str = Field(default="module ")
    source_suffix: str = Field(default=".go")

    # Release check
    release_api_url: str = Field(default=DEFAULT_RELEASE_API_URL)
    http_timeout: int = Field(default=10, ge=1)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GOI_TEMPLATE_URL, GOI_TEMPLATE_MODULE, GOI_CLONE_DEPTH,
            GOI_GIT_TIMEOUT, GOI_RELEASE_API_URL, GOI_HTTP_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GOI_TEMPLATE_URL"):
            kwargs["template_url"] = os.environ["GOI_TEMPLATE_URL"]
        if os.environ.get("GOI_TEMPLATE_MODULE"):
            kwargs["template_module"] = os.environ["GOI_TEMPLATE_MODULE"]
        if os.environ.get("GOI_CLONE_DEPTH"):
            kwargs["clone_depth"] = int(os.environ["GOI_CLONE_DEPTH"])
        if os.environ.get("GOI_GIT_TIMEOUT"):
            kwargs["git_timeout"] = int(os.environ["GOI_GIT_TIMEOUT"])
        if os.environ.get("GOI_RELEASE_API_URL"):
            kwargs["release_api_url"] = os.environ["GOI_RELEASE_API_URL"]
        if os.environ.get("GOI_HTTP_TIMEOUT"):
            kwargs["http_timeout"] = int(os.environ["GOI_HTTP_TIMEOUT"])
        return cls(**kwargs)
