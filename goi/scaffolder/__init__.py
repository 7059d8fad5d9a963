"""goi scaffolder -- generates Go boilerplate from Jinja2 templates.

Quick usage::

    from goi.scaffolder import ArtifactKind, ArtifactRenderer, build_default_catalog

    renderer = ArtifactRenderer(build_default_catalog(), project_root=".")
    renderer.generate(ArtifactKind.HANDLER, "Order")  # handlers/order_handler.go
    renderer.generate(ArtifactKind.RESPONSE)          # response/*.go
"""

from goi.scaffolder.catalog import (
    ArtifactKind,
    ArtifactTemplate,
    CatalogEntry,
    TemplateCatalog,
    build_default_catalog,
)
from goi.scaffolder.module import resolve_module
from goi.scaffolder.naming import NameVariants, resolve_name
from goi.scaffolder.renderer import ArtifactRenderer, GeneratedFile
from goi.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactKind",
    "ArtifactRenderer",
    "ArtifactTemplate",
    "CatalogEntry",
    "GeneratedFile",
    "NameVariants",
    "TemplateCatalog",
    "TemplateRenderer",
    "build_default_catalog",
    "resolve_module",
    "resolve_name",
]
