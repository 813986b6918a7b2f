"""Frontend setup through the external create-polkadot-dapp scaffolder.

The scaffolder is cloned into a temporary directory next to the project,
installed, built and then run from inside the project's ``front/``
directory. Its output nests the real frontend one level deeper, bundled with
its own contracts and README, so the result is flattened afterwards.

The temporary clone is removed exactly once per run, whether the run
succeeds or fails at any step.

Two runs against the same project directory at the same time share the same
temporary and generated paths; callers must not do that.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from ..config import ProjectPaths, StarterConfig
from ..files import cleanup_temp_files, move_directory_contents, path_exists, safe_remove
from ..process import (
    build_project,
    clone_repository,
    execute_command,
    install_dependencies,
    raise_for_result,
)
from ..utils import print_step, print_success, print_warning


class FrontendSetupResult(BaseModel):
    """Outcome of a successful frontend setup."""

    success: bool = True
    output: str = Field(default="", description="Captured stdout of the scaffolder")


class ValidationResult(BaseModel):
    """Outcome of ``validate_frontend_setup``."""

    valid: bool
    errors: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


async def setup_frontend_with_polkadot_dapp(
    project_dir: str | Path,
    project_name: str,
    config: StarterConfig | None = None,
) -> FrontendSetupResult:
    """Populate ``<project_dir>/front`` using create-polkadot-dapp.

    Steps run strictly in order: clone, install, build, generate,
    reorganise, clean up. Each step starts only after the previous one
    succeeded.

    Args:
        project_dir: Root of the project created by the scaffolder.
        project_name: Project name; the generated app is called
            ``<project_name>-frontend``.
        config: Starter configuration. Defaults to ``StarterConfig()``.

    Returns:
        ``FrontendSetupResult`` with the scaffolder's stdout.

    Raises:
        CommandError: If clone, install, build or generation exits non-zero.
        OSError: If a tool cannot be launched or the reorganisation fails.
    """
    config = config or StarterConfig()
    paths = config.paths(project_dir, project_name)
    show_output = config.show_output

    print_step(f"Setting up frontend with {config.tool_name}...")

    try:
        await clone_repository(
            config.repo_url,
            paths.temp_repo_dir,
            paths.project_dir,
            show_output=show_output,
        )
        await install_dependencies(
            paths.temp_repo_dir, config.package_manager, show_output=show_output
        )
        await build_project(
            paths.temp_repo_dir, config.package_manager, show_output=show_output
        )

        print_step("Creating frontend project...")
        result = await execute_command(
            config.node_binary,
            [
                str(paths.entry_script_path),
                "--project-name",
                f"{paths.project_name}-frontend",
                "--template",
                config.template,
            ],
            cwd=paths.front_dir,
            show_output=show_output,
        )
        raise_for_result(result, f"{config.tool_name} failed", command=config.tool_name)
        print_success("Frontend project created!")

        await reorganize_frontend_structure(paths.front_dir, paths.project_name, paths=paths)
    except Exception:
        try:
            await cleanup_temp_files([paths.temp_repo_dir])
        except Exception as cleanup_exc:
            print_warning(f"Warning: Cleanup after failure did not complete: {cleanup_exc}")
        raise

    await cleanup_temp_files([paths.temp_repo_dir])

    print_success("Frontend setup completed successfully!")
    return FrontendSetupResult(success=True, output=result.stdout)


# ---------------------------------------------------------------------------
# Reorganiser
# ---------------------------------------------------------------------------


async def reorganize_frontend_structure(
    front_dir: str | Path,
    project_name: str,
    *,
    paths: ProjectPaths | None = None,
) -> None:
    """Flatten the scaffolder output into *front_dir*.

    Each step is skipped when its target is missing:

    1. move ``<name>-frontend/frontend/*`` into *front_dir*;
    2. drop ``<name>-frontend/contracts``;
    3. drop the generated ``README.md`` in *front_dir*;
    4. drop the now-empty ``<name>-frontend`` wrapper.

    Any failure is reported as a warning and re-raised.
    """
    print_step("Reorganizing frontend structure...")

    front = Path(front_dir)
    if paths is None:
        paths = ProjectPaths(
            project_dir=front.parent,
            project_name=project_name,
            front_dir_name=front.name,
        )

    try:
        if await path_exists(paths.frontend_source_path):
            await move_directory_contents(paths.frontend_source_path, front)
            print_success("Frontend files moved to correct location!")

        if await path_exists(paths.contracts_path):
            await safe_remove(paths.contracts_path)
            print_success("Removed duplicate contracts folder!")

        if await path_exists(paths.readme_path):
            await safe_remove(paths.readme_path)
            print_success("Removed generated README!")

        if await path_exists(paths.created_project_path):
            await safe_remove(paths.created_project_path)
            print_success("Cleaned up nested directories!")
    except Exception as exc:
        print_warning(f"Warning: Failed to reorganize frontend structure: {exc}")
        raise


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


async def _tool_available(command: str) -> bool:
    try:
        result = await execute_command(command, ["--version"], show_output=False)
    except OSError:
        return False
    return result.ok


async def validate_frontend_setup(
    project_dir: str | Path,
    config: StarterConfig | None = None,
) -> ValidationResult:
    """Check the prerequisites of ``setup_frontend_with_polkadot_dapp``.

    Read-only. Reports a missing ``front/`` directory, a missing ``git``,
    and a missing package manager (the fallback counts as present).
    """
    config = config or StarterConfig()
    errors: list[str] = []

    front_dir = Path(project_dir) / config.front_dir_name
    if not await path_exists(front_dir):
        errors.append("Frontend directory does not exist")

    if not await _tool_available("git"):
        errors.append("Git is not available")

    if not await _tool_available(config.package_manager):
        if not await _tool_available(config.fallback_package_manager):
            errors.append(
                f"Neither {config.package_manager} nor "
                f"{config.fallback_package_manager} is available"
            )

    return ValidationResult(valid=not errors, errors=errors)
