"""goi -- scaffold Go projects and generate Go boilerplate.

Two entry points cover the whole tool:

* :class:`goi.project.ProjectMaterializer` clones the Go project template,
  rewrites its ``go.mod`` module line and re-points every import path in the
  cloned tree at the new module.
* :class:`goi.scaffolder.ArtifactRenderer` renders handlers, models,
  services, repositories and the response bundle into their conventional
  directories.
"""

__version__ = "1.0.2"
