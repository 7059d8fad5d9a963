"""Generate Go artifacts (handlers, models, services, ...) from templates.

``ArtifactRenderer.generate`` is the whole of ``goi make``: resolve the name
variants, look the kind up in the catalog, make sure the target directory
exists, read the module identifier when the kind imports sibling packages,
render, and write.  Existing files are overwritten without warning, so
regenerating an artifact discards any hand edits made to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from goi.config import Config
from goi.errors import ScaffoldIOError, TemplateMissingError
from goi.utils import ensure_dir, print_success

from .catalog import ArtifactKind, CatalogEntry, TemplateCatalog
from .module import resolve_module
from .naming import NameVariants, resolve_name
from .templates import TemplateRenderer


@dataclass(frozen=True)
class GeneratedFile:
    """A rendered artifact that has not been written yet."""

    path: Path
    content: str


class ArtifactRenderer:
    """Binds resource names into catalog templates and writes the results.

    Args:
        catalog: The artifact registry, usually from ``build_default_catalog``.
        project_root: Directory holding ``go.mod``; artifact directories are
            created beneath it.
        config: Supplies the manifest file name and module keyword.
        renderer: Template engine; defaults to the bundled templates.

    Raises:
        TemplateMissingError: A catalog template is not in the renderer's
            template directory.
    """

    def __init__(
        self,
        catalog: TemplateCatalog,
        project_root: str | Path = ".",
        config: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.catalog = catalog
        self.project_root = Path(project_root)
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer()

        missing = sorted(catalog.template_names() - set(self.renderer.list_templates()))
        if missing:
            raise TemplateMissingError(missing, self.renderer.template_dir)

    # -- Public API --------------------------------------------------------

    def generate(self, kind: ArtifactKind | str, raw_name: str | None = None) -> list[Path]:
        """Render *kind* for *raw_name* and write the files.

        Args:
            kind: Artifact kind (or its string value).
            raw_name: Resource identifier.  Ignored for the response bundle.

        Returns:
            The written paths, in catalog order.

        Raises:
            UnknownKindError: *kind* is not in the catalog.
            ModuleIdentityError: ``go.mod`` is unreadable or has no module line.
            ScaffoldIOError: A directory or file could not be created.
        """
        entry = self.catalog.lookup(kind)
        variants = self._variants(entry, raw_name)

        directory = self.project_root / entry.directory
        try:
            ensure_dir(directory)
        except OSError as exc:
            raise ScaffoldIOError(
                f"failed to create directory {directory}: {exc}", path=directory
            ) from exc

        written: list[Path] = []
        for generated in self._render_entry(entry, variants):
            self._write(entry, generated)
            written.append(generated.path)
            if variants is None:
                print_success(f"{entry.label} file '{generated.path.name}' created successfully")
            else:
                print_success(f"{entry.label} '{variants.raw}' created successfully")
        return written

    def render(self, kind: ArtifactKind | str, raw_name: str | None = None) -> list[GeneratedFile]:
        """Render *kind* without touching the file system (``go.mod`` is still read)."""
        entry = self.catalog.lookup(kind)
        return self._render_entry(entry, self._variants(entry, raw_name))

    # -- Internals ---------------------------------------------------------

    @staticmethod
    def _variants(entry: CatalogEntry, raw_name: str | None) -> NameVariants | None:
        if not entry.needs_name:
            return None
        if not raw_name:
            raise ValueError(f"{entry.kind.value} requires a resource name")
        return resolve_name(raw_name)

    def _context(self, entry: CatalogEntry, variants: NameVariants | None) -> dict[str, Any]:
        context: dict[str, Any] = {}
        if variants is not None:
            context.update(name=variants.raw, lower=variants.lower, title=variants.title)
        if entry.needs_module:
            context["module"] = resolve_module(
                self.project_root,
                manifest_filename=self.config.manifest_filename,
                keyword=self.config.module_keyword,
            )
        return context

    def _render_entry(
        self, entry: CatalogEntry, variants: NameVariants | None
    ) -> list[GeneratedFile]:
        context = self._context(entry, variants)
        slug = variants.file_slug if variants is not None else None
        directory = self.project_root / entry.directory
        return [
            GeneratedFile(
                path=directory / template.output_name(slug),
                content=self.renderer.render(template.template, context),
            )
            for template in entry.templates
        ]

    @staticmethod
    def _write(entry: CatalogEntry, generated: GeneratedFile) -> None:
        try:
            generated.path.write_text(generated.content, encoding="utf-8")
        except OSError as exc:
            raise ScaffoldIOError(
                f"failed to create {entry.kind.value} file {generated.path}: {exc}",
                path=generated.path,
            ) from exc
