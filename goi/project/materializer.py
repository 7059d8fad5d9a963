"""Create a new Go project from the template repository.

``ProjectMaterializer.create`` runs four steps in order: validate the target
directory, clone the template into it, rewrite ``go.mod``'s module line, and
rewrite the template's module string across every ``.go`` file.  The first
failing step aborts the whole operation.  Nothing is cleaned up afterwards,
so the target directory keeps whatever the failing step left behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from goi.config import Config
from goi.errors import ScaffoldIOError, TargetNotEmptyError
from goi.utils import is_empty_dir, print_info, print_success

from .git import GitCloner, TemplateCloner
from .manifest import derive_module_path, rewrite_module_line
from .rewriter import rewrite_tree


@dataclass
class ProjectInfo:
    """Outcome of a successful :meth:`ProjectMaterializer.create`."""

    name: str
    path: Path
    module: str
    previous_module: str
    rewritten_files: list[Path] = field(default_factory=list)


class ProjectMaterializer:
    """Clones the Go project template and re-points it at a new module.

    Args:
        config: Template URL, template module string and Go conventions.
        cloner: Version-control collaborator; defaults to :class:`GitCloner`.
        base_dir: Directory in which project directories are created.
    """

    def __init__(
        self,
        config: Config | None = None,
        cloner: TemplateCloner | None = None,
        base_dir: str | Path = ".",
    ) -> None:
        self.config = config or Config()
        self.cloner = cloner or GitCloner(
            depth=self.config.clone_depth, timeout=self.config.git_timeout
        )
        self.base_dir = Path(base_dir)

    async def create(self, project_name: str) -> ProjectInfo:
        """Materialize *project_name* under ``base_dir``.

        Raises:
            CloneError: git is missing or the clone failed.
            TargetNotEmptyError: The target directory exists and has entries.
            ScaffoldIOError: The target directory could not be inspected or created.
            ManifestRewriteError: ``go.mod`` could not be rewritten.
            FileRewriteError: A ``.go`` file could not be rewritten.
        """
        if not project_name:
            raise ValueError("project name must not be empty")

        self.cloner.ensure_available()
        target = self.prepare_target(self.base_dir / project_name)

        print_info("Cloning project template...")
        await self.cloner.clone(self.config.template_url, target)
        print_success("Project cloned successfully!")

        module = derive_module_path(project_name)
        previous = rewrite_module_line(
            target / self.config.manifest_filename,
            module,
            keyword=self.config.module_keyword,
        )
        print_success(f"{self.config.manifest_filename} updated successfully!")

        print_info("Updating import paths in Go files...")
        rewritten = rewrite_tree(
            target,
            self.config.template_module,
            project_name,
            suffix=self.config.source_suffix,
        )
        print_success("Import paths updated successfully!")

        return ProjectInfo(
            name=project_name,
            path=target,
            module=module,
            previous_module=previous,
            rewritten_files=rewritten,
        )

    @staticmethod
    def prepare_target(target: Path) -> Path:
        """Make sure *target* is an empty directory, creating it if missing.

        Raises:
            TargetNotEmptyError: *target* exists and has at least one entry.
            ScaffoldIOError: *target* is not a directory or cannot be created.
        """
        target = target.absolute()
        try:
            if target.exists():
                if not is_empty_dir(target):
                    raise TargetNotEmptyError(target)
                print_info(f"Directory {target} exists but is empty. Proceeding with clone.")
            else:
                target.mkdir(parents=True)
        except OSError as exc:
            raise ScaffoldIOError(
                f"error preparing directory '{target}': {exc}", path=target
            ) from exc
        return target
