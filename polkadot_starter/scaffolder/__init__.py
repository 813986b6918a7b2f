"""Polkadot Cloud Starter scaffolder -- creates the base project skeleton.

Quick usage::

    from polkadot_starter.scaffolder import create_project_files, create_project_structure

    await create_project_structure("/tmp/my-dapp")
    await create_project_files("/tmp/my-dapp", "my-dapp")
"""

from polkadot_starter.scaffolder.generator import (
    PROJECT_DIRECTORIES,
    create_project_files,
    create_project_structure,
    generate_cursor_rules,
    generate_docs_workflow,
    generate_frontend_workflow,
    generate_readme,
)
from polkadot_starter.scaffolder.templates import TemplateRenderer

__all__ = [
    "PROJECT_DIRECTORIES",
    "TemplateRenderer",
    "create_project_files",
    "create_project_structure",
    "generate_cursor_rules",
    "generate_docs_workflow",
    "generate_frontend_workflow",
    "generate_readme",
]
