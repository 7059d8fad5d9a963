"""Command-line entry point for goi.

Usage::

    goi new my-app
    goi make handler Order
    goi make response
    goi list | goi remove my-app | goi tree --dirs | goi version --check
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from goi import __version__
from goi.config import Config
from goi.errors import GoiError
from goi.project import ProjectMaterializer, build_tree, list_projects, remove_project
from goi.release import fetch_latest_release
from goi.scaffolder import ArtifactKind, ArtifactRenderer, build_default_catalog
from goi.utils import (
    console,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

# ``goi make <subcommand>`` -> artifact kind
MAKE_COMMANDS: dict[str, ArtifactKind] = {
    "handler": ArtifactKind.HANDLER,
    "model": ArtifactKind.MODEL,
    "service": ArtifactKind.SERVICE,
    "repo": ArtifactKind.REPOSITORY,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goi",
        description="goi is a CLI tool to create Go projects and generate Go boilerplate",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  goi new my-app\n"
            "  goi make handler Order\n"
            "  goi make response\n"
        ),
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="<command>")

    new = commands.add_parser("new", help="Create a new Go project from the template")
    new.add_argument("project_name", help="Directory and module name of the new project")

    make = commands.add_parser("make", help="Generate Go boilerplate (goi make <type> <name>)")
    kinds = make.add_subparsers(dest="kind", required=True, metavar="<type>")
    for command, kind in MAKE_COMMANDS.items():
        sub = kinds.add_parser(command, help=f"Generate a new {kind.value}")
        sub.add_argument("name", help="Resource name, e.g. Order")
    kinds.add_parser(
        "response",
        help="Generate response files (SuccessResponse, ErrorResponse, Pagination)",
    )

    commands.add_parser("list", help="List Go projects in the current directory")

    remove = commands.add_parser("remove", help="Remove a Go project directory")
    remove.add_argument("project_name")

    tree = commands.add_parser("tree", help="Display the folder structure, excluding hidden entries")
    tree.add_argument("path", nargs="?", default=".")
    tree.add_argument("-d", "--dirs", action="store_true", help="Show directories only")

    version = commands.add_parser("version", help="Show the current version of goi")
    version.add_argument("--check", action="store_true", help="Check for a newer release")

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_new(args: argparse.Namespace, config: Config) -> None:
    materializer = ProjectMaterializer(config)
    info = asyncio.run(materializer.create(args.project_name))

    print_success("Your Go project has been created successfully!")
    print_summary_table(
        {
            "Project": info.name,
            "Path": str(info.path),
            "Module": info.module,
            "Replaced": info.previous_module,
            "Go files updated": str(len(info.rewritten_files)),
        },
        title="New project",
    )
    print_info("To get started:")
    print_info(f"  1. cd {info.name}")
    print_info("  2. go mod tidy")
    print_info("  3. go run cmd/api/main.go")


def _cmd_make(args: argparse.Namespace, config: Config) -> None:
    renderer = ArtifactRenderer(build_default_catalog(), project_root=Path("."), config=config)
    if args.kind == "response":
        renderer.generate(ArtifactKind.RESPONSE)
    else:
        renderer.generate(MAKE_COMMANDS[args.kind], args.name)


def _cmd_list(args: argparse.Namespace, config: Config) -> None:
    projects = list_projects(".", manifest_filename=config.manifest_filename)
    if not projects:
        print_info("No Go projects found.")
        return
    print_info("Listing Go Projects:")
    for name in projects:
        print_success(f" - {name}")


def _cmd_remove(args: argparse.Namespace, config: Config) -> None:
    remove_project(args.project_name)
    print_success(f"Project '{args.project_name}' removed successfully!")


def _cmd_tree(args: argparse.Namespace, config: Config) -> None:
    tree, dirs, files = build_tree(args.path, dirs_only=args.dirs)
    console.print(tree)
    console.print(f"\n{dirs} directories, {files} files")


def _cmd_version(args: argparse.Namespace, config: Config) -> None:
    print_success(f"goi CLI version {__version__}")
    if not args.check:
        return
    release = asyncio.run(
        fetch_latest_release(config.release_api_url, timeout=config.http_timeout)
    )
    if release.update_available:
        print_warning(f"A newer version is available: {release.latest}")
    else:
        print_info(f"You are already on the latest version: {release.current}")


_HANDLERS = {
    "new": _cmd_new,
    "make": _cmd_make,
    "list": _cmd_list,
    "remove": _cmd_remove,
    "tree": _cmd_tree,
    "version": _cmd_version,
}


def main(argv: list[str] | None = None) -> int:
    """Run goi with *argv* and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
        _HANDLERS[args.command](args, config)
    except (GoiError, ValueError, OSError) as exc:
        print_error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
