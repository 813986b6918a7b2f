"""Polkadot Cloud Starter command-line interface.

Creates a new project directory with the base skeleton, then populates
``front/`` with create-polkadot-dapp.

Usage::

    polkadot-starter
    polkadot-starter my-dapp --directory ~/work
    polkadot-starter my-dapp --check
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape
from rich.prompt import Prompt

from .banner import display_welcome_art
from .config import StarterConfig
from .frontend import setup_frontend_with_polkadot_dapp, validate_frontend_setup
from .scaffolder import create_project_files, create_project_structure
from .utils import console, print_error, print_success, print_summary_table, print_warning

MANUAL_PACKAGE_URL = "https://github.com/w3b3d3v/create-polkadot-dapp"

PROJECT_TREE = """\
   ├── contracts/
   │   ├── develop/    # Smart contract development
   │   └── deploy/     # Contract deployment scripts
   ├── front/          # React frontend with Polkadot integration
   ├── cloud-functions/ # Cloud function implementations
   ├── .cursor/        # Cursor IDE configuration
   └── .github/        # CI/CD workflows"""


# ---------------------------------------------------------------------------
# Project name input
# ---------------------------------------------------------------------------


def validate_project_name(value: str) -> str | None:
    """Return an error message for an unusable name, or ``None``."""
    if not value.strip():
        return "Project name cannot be empty."
    return None


def prompt_project_name() -> str:
    """Ask for a project name until a non-blank one is entered."""
    while True:
        value = Prompt.ask("Enter your project name", console=console)
        error = validate_project_name(value)
        if error is None:
            return value.strip()
        print_error(error)


# ---------------------------------------------------------------------------
# Main flow
# ---------------------------------------------------------------------------


def _print_manual_instructions(project_name: str, config: StarterConfig) -> None:
    console.print("\nYou can manually setup the frontend later by running:")
    console.print(f"   cd {escape(project_name)}/front", highlight=False)
    console.print(
        f"   npx --yes --package={MANUAL_PACKAGE_URL} {escape(config.tool_name)} "
        f"--project-name temp-frontend --template {escape(config.template)}",
        highlight=False,
        soft_wrap=True,
    )
    console.print("   Then move the contents of temp-frontend/frontend/ to the current directory")


async def init(
    project_name: str,
    parent_dir: str | Path,
    config: StarterConfig,
    skip_frontend: bool = False,
) -> int:
    """Create a project and set up its frontend.

    Returns:
        Process exit code: ``1`` if the skeleton could not be created,
        otherwise ``0`` (a failed frontend setup only produces a warning).
    """
    name = project_name.strip()
    project_dir = Path(parent_dir) / name

    try:
        console.print(f'Creating project structure for "{escape(name)}"...')
        await create_project_structure(project_dir)
        written = await create_project_files(project_dir, name)
    except Exception as exc:
        print_error(f"Error creating project: {exc}")
        return 1

    print_success(f'Project "{name}" created successfully at {project_dir}!')
    console.print("\nCreated files:")
    for rel in written:
        console.print(f"- {escape(rel)}", highlight=False)

    if skip_frontend:
        print_warning("\nSkipping frontend setup.")
        _print_manual_instructions(name, config)
        return 0

    try:
        await setup_frontend_with_polkadot_dapp(project_dir, name, config)
    except Exception as exc:
        print_warning(
            "\nProject structure created successfully, but frontend setup "
            "encountered an issue:"
        )
        print_warning(f"   {exc}")
        _print_manual_instructions(name, config)
        console.print(f"\nYour project structure is ready at: {escape(str(project_dir))}")
        return 0

    print_success(f'\nComplete! Your Polkadot project "{name}" is ready!')
    console.print("\nProject structure:")
    console.print(PROJECT_TREE, highlight=False)
    console.print("\nNext steps:")
    console.print(f"   1. cd {escape(name)}/front", highlight=False)
    console.print("   2. npm run dev")
    console.print("\nCheck the README.md for more details!")
    return 0


async def check(project_dir: str | Path, config: StarterConfig) -> int:
    """Print the frontend prerequisites report; ``0`` when all are met."""
    result = await validate_frontend_setup(project_dir, config)
    rows = {"Project directory": str(project_dir), "Valid": "yes" if result.valid else "no"}
    for index, error in enumerate(result.errors, start=1):
        rows[f"Problem {index}"] = error
    print_summary_table(rows, title="Frontend Prerequisites")
    return 0 if result.valid else 1


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polkadot-starter",
        description="Polkadot Cloud Starter -- scaffold a Polkadot dApp project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  polkadot-starter\n"
            "  polkadot-starter my-dapp --directory ~/work\n"
            "  polkadot-starter my-dapp --check\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    parser.add_argument(
        "--directory", "-d",
        default=".",
        help="Directory in which the project folder is created (default: .)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read POLKADOT_STARTER_* variables)",
    )
    parser.add_argument(
        "--skip-frontend",
        action="store_true",
        help="Only create the skeleton; do not run create-polkadot-dapp",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not echo the output of external tools",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the frontend prerequisites are met",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``polkadot-starter`` and ``python -m polkadot_starter``."""
    args = _build_parser().parse_args(argv)

    try:
        config = StarterConfig.load(Path(args.config)) if args.config else StarterConfig.from_env()
    except Exception as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)
    if args.quiet:
        config = config.model_copy(update={"show_output": False})

    parent_dir = Path(args.directory).resolve()

    try:
        if args.check:
            target = parent_dir / args.name.strip() if args.name else parent_dir
            code = asyncio.run(check(target, config))
        else:
            display_welcome_art()
            if args.name is not None and validate_project_name(args.name) is None:
                name = args.name.strip()
            else:
                if args.name is not None:
                    print_error("Project name cannot be empty.")
                name = prompt_project_name()
            code = asyncio.run(init(name, parent_dir, config, skip_frontend=args.skip_frontend))
    except KeyboardInterrupt:
        print_error("\nAborted.")
        code = 130

    sys.exit(code)


if __name__ == "__main__":
    main()
