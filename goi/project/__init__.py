"""goi project materialization -- new projects from the Go template.

Quick usage::

    import asyncio
    from goi.project import ProjectMaterializer

    info = asyncio.run(ProjectMaterializer().create("my-app"))
    print(info.module)  # "my/app"
"""

from goi.project.git import GitCloner, TemplateCloner
from goi.project.manifest import derive_module_path, rewrite_module_line
from goi.project.materializer import ProjectInfo, ProjectMaterializer
from goi.project.rewriter import rewrite_tree
from goi.project.workspace import build_tree, list_projects, remove_project

__all__ = [
    "GitCloner",
    "ProjectInfo",
    "ProjectMaterializer",
    "TemplateCloner",
    "build_tree",
    "derive_module_path",
    "list_projects",
    "remove_project",
    "rewrite_module_line",
    "rewrite_tree",
]
