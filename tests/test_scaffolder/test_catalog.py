"""Tests for the artifact template catalog.

Covers:
- Lookup by enum member and by string value
- Unknown kinds
- Directory, file name and module requirements per kind
- The response bundle
- Every catalog template exists in the bundled template directory
"""

from __future__ import annotations

import pytest

from goi.errors import UnknownKindError
from goi.scaffolder.catalog import (
    ArtifactKind,
    ArtifactTemplate,
    CatalogEntry,
    TemplateCatalog,
    build_default_catalog,
)
from goi.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog() -> TemplateCatalog:
    return build_default_catalog()


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_has_every_kind(self, catalog):
        assert len(catalog) == len(ArtifactKind)
        assert set(catalog.kinds()) == set(ArtifactKind)

    def test_lookup_by_string(self, catalog):
        assert catalog.lookup("handler") is catalog.lookup(ArtifactKind.HANDLER)

    def test_unknown_kind(self, catalog):
        with pytest.raises(UnknownKindError, match="unknown resource type: controller"):
            catalog.lookup("controller")

    def test_registered_enum_missing_from_custom_catalog(self):
        entry = build_default_catalog().lookup(ArtifactKind.MODEL)
        custom = TemplateCatalog({ArtifactKind.MODEL: entry})
        with pytest.raises(UnknownKindError) as exc_info:
            custom.lookup(ArtifactKind.HANDLER)
        assert exc_info.value.kind == ArtifactKind.HANDLER

    def test_contains(self, catalog):
        assert "repository" in catalog
        assert ArtifactKind.RESPONSE in catalog
        assert "repo" not in catalog
        assert 42 not in catalog


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


class TestEntries:
    @pytest.mark.parametrize(
        ("kind", "directory", "filename", "needs_module"),
        [
            (ArtifactKind.HANDLER, "handlers", "order_handler.go", True),
            (ArtifactKind.MODEL, "models", "order_model.go", False),
            (ArtifactKind.SERVICE, "service", "order_service.go", True),
            (ArtifactKind.REPOSITORY, "repository", "order_repository.go", True),
        ],
    )
    def test_single_file_kinds(self, catalog, kind, directory, filename, needs_module):
        entry = catalog.lookup(kind)
        assert entry.directory == directory
        assert entry.needs_module is needs_module
        assert entry.needs_name is True
        assert len(entry.templates) == 1
        assert entry.templates[0].output_name("order") == filename

    def test_response_bundle(self, catalog):
        entry = catalog.lookup(ArtifactKind.RESPONSE)
        assert entry.directory == "response"
        assert entry.needs_name is False
        assert entry.needs_module is False
        assert [t.output_name() for t in entry.templates] == [
            "success_response.go",
            "error_response.go",
            "pagination_response.go",
        ]

    def test_label(self, catalog):
        assert catalog.lookup(ArtifactKind.REPOSITORY).label == "Repository"

    def test_entries_are_frozen(self):
        entry = CatalogEntry(
            kind=ArtifactKind.MODEL,
            directory="models",
            templates=(ArtifactTemplate("model.go.j2", "{slug}_model.go"),),
        )
        with pytest.raises(AttributeError):
            entry.directory = "other"  # type: ignore[misc]


class TestBundledTemplates:
    def test_template_names(self, catalog):
        names = catalog.template_names()
        assert len(names) == 7
        assert "handler.go.j2" in names
        assert "response/pagination_response.go.j2" in names

    def test_every_catalog_template_exists(self, catalog):
        assert catalog.template_names() <= set(TemplateRenderer().list_templates())
