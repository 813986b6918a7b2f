"""Base project skeleton.

Creates the fixed directory layout of a Polkadot Cloud Starter project and
renders its boilerplate files (IDE rules, CI workflows, README). The
``front/`` directory is created empty here and filled later by the frontend
pipeline.
"""

from __future__ import annotations

from pathlib import Path

from ..files import FileToWrite, ensure_directories, write_files
from .templates import TemplateRenderer

PROJECT_DIRECTORIES: tuple[str, ...] = (
    "contracts/develop",
    "contracts/deploy",
    "front",
    "cloud-functions",
    ".cursor/rules",
    ".github/workflows",
)

NODE_VERSION = "18"

_renderer = TemplateRenderer()


# ---------------------------------------------------------------------------
# Content generators
# ---------------------------------------------------------------------------


def generate_cursor_rules() -> str:
    """Cursor IDE rules describing the project layout."""
    return _renderer.render("project-structure.mdc.j2")


def generate_frontend_workflow() -> str:
    """GitHub Actions workflow that builds and tests ``front/``."""
    return _renderer.render("frontend-build.yml.j2", {"node_version": NODE_VERSION})


def generate_docs_workflow() -> str:
    """GitHub Actions workflow that builds and publishes the docs."""
    return _renderer.render("docs-build.yml.j2", {"node_version": NODE_VERSION})


def generate_readme(project_name: str) -> str:
    return _renderer.render("README.md.j2", {"project_name": project_name})


# ---------------------------------------------------------------------------
# Skeleton creation
# ---------------------------------------------------------------------------


async def create_project_structure(project_dir: str | Path) -> list[Path]:
    """Create the base directory layout under *project_dir*.

    Returns:
        The directories that were ensured.
    """
    root = Path(project_dir)
    directories = [root / rel for rel in PROJECT_DIRECTORIES]
    await ensure_directories(directories)
    return directories


async def create_project_files(project_dir: str | Path, project_name: str) -> list[str]:
    """Write the boilerplate files into an existing skeleton.

    ``create_project_structure`` must have run first; parent directories are
    not created here.

    Returns:
        Paths of the written files, relative to *project_dir*.
    """
    root = Path(project_dir)
    contents = {
        ".cursor/rules/project-structure.mdc": generate_cursor_rules(),
        ".github/workflows/frontend-build.yml": generate_frontend_workflow(),
        ".github/workflows/docs-build.yml": generate_docs_workflow(),
        "README.md": generate_readme(project_name),
    }
    await write_files(FileToWrite(root / rel, content) for rel, content in contents.items())
    return list(contents)
