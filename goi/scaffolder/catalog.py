"""The fixed mapping from artifact kind to templates and target directory.

The catalog is an explicit, read-only registry: it is built once (usually by
the CLI via :func:`build_default_catalog`) and handed to
:class:`~goi.scaffolder.renderer.ArtifactRenderer` by reference.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from goi.errors import UnknownKindError


class ArtifactKind(str, Enum):
    """The closed set of things ``goi make`` can generate."""

    HANDLER = "handler"
    MODEL = "model"
    SERVICE = "service"
    REPOSITORY = "repository"
    RESPONSE = "response"


@dataclass(frozen=True)
class ArtifactTemplate:
    """One template of a kind and the file name it renders to.

    ``filename`` is a ``str.format`` pattern; ``{slug}`` is replaced with the
    resource's file slug.  Bundle members use a fixed name without a slug.
    """

    template: str
    filename: str

    def output_name(self, slug: str | None = None) -> str:
        return self.filename.format(slug=slug or "")


@dataclass(frozen=True)
class CatalogEntry:
    """Everything the renderer needs to generate one kind."""

    kind: ArtifactKind
    directory: str
    templates: tuple[ArtifactTemplate, ...]
    needs_module: bool = False
    needs_name: bool = True

    @property
    def label(self) -> str:
        """Display name used in confirmations (``"Handler"``)."""
        return self.kind.value.title()


class TemplateCatalog:
    """Read-only registry of :class:`CatalogEntry` keyed by kind."""

    def __init__(self, entries: Mapping[ArtifactKind, CatalogEntry]) -> None:
        self._entries = dict(entries)

    def lookup(self, kind: ArtifactKind | str) -> CatalogEntry:
        """Return the entry for *kind*.

        *kind* may be an :class:`ArtifactKind` or its string value.

        Raises:
            UnknownKindError: If *kind* is not registered.
        """
        try:
            key = ArtifactKind(kind)
        except ValueError as exc:
            raise UnknownKindError(kind) from exc
        entry = self._entries.get(key)
        if entry is None:
            raise UnknownKindError(kind)
        return entry

    def kinds(self) -> list[ArtifactKind]:
        return list(self._entries)

    def template_names(self) -> set[str]:
        """Every template path referenced by the catalog."""
        return {
            template.template
            for entry in self._entries.values()
            for template in entry.templates
        }

    def __contains__(self, kind: object) -> bool:
        try:
            return ArtifactKind(kind) in self._entries
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._entries)


def _single(kind: ArtifactKind, directory: str, *, needs_module: bool) -> CatalogEntry:
    return CatalogEntry(
        kind=kind,
        directory=directory,
        templates=(
            ArtifactTemplate(
                template=f"{kind.value}.go.j2",
                filename="{slug}_" + kind.value + ".go",
            ),
        ),
        needs_module=needs_module,
    )


def build_default_catalog() -> TemplateCatalog:
    """Build the catalog of the five built-in Go artifact kinds."""
    response = CatalogEntry(
        kind=ArtifactKind.RESPONSE,
        directory="response",
        templates=tuple(
            ArtifactTemplate(template=f"response/{name}.j2", filename=name)
            for name in (
                "success_response.go",
                "error_response.go",
                "pagination_response.go",
            )
        ),
        needs_name=False,
    )
    return TemplateCatalog(
        {
            ArtifactKind.HANDLER: _single(ArtifactKind.HANDLER, "handlers", needs_module=True),
            ArtifactKind.MODEL: _single(ArtifactKind.MODEL, "models", needs_module=False),
            ArtifactKind.SERVICE: _single(ArtifactKind.SERVICE, "service", needs_module=True),
            ArtifactKind.REPOSITORY: _single(
                ArtifactKind.REPOSITORY, "repository", needs_module=True
            ),
            ArtifactKind.RESPONSE: response,
        }
    )
