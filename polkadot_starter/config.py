"""Polkadot Cloud Starter configuration.

Typed configuration for the scaffolder and the frontend pipeline. Settings
use Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_REPO_URL = "https://github.com/w3b3d3v/create-polkadot-dapp.git"
DEFAULT_TOOL_NAME = "create-polkadot-dapp"
DEFAULT_TEMPLATE = "react-solidity-hardhat"

_FALSE_VALUES = {"0", "false", "no", "off"}


class ProjectPaths(BaseModel):
    """Every filesystem location touched by the frontend pipeline.

    Only the inputs are stored; all locations are derived on access, so two
    instances built from the same inputs always agree. Cleanup relies on this
    to find the temporary clone again after a failure.
    """

    project_dir: Path
    project_name: str
    front_dir_name: str = Field(default="front", min_length=1)
    tool_name: str = Field(default=DEFAULT_TOOL_NAME, min_length=1)
    entry_script: str = Field(default="dist/src/bin/main.js", min_length=1)

    @field_validator("project_name")
    @classmethod
    def _strip_project_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Project name cannot be empty.")
        return stripped

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def front_dir(self) -> Path:
        """Directory that ends up holding the flattened frontend source."""
        return self.project_dir / self.front_dir_name

    @property
    def temp_repo_dir(self) -> Path:
        """Working checkout of the external scaffolder."""
        return self.project_dir / f"temp-{self.tool_name}"

    @property
    def created_project_path(self) -> Path:
        """Wrapper directory the external scaffolder generates."""
        return self.front_dir / f"{self.project_name}-frontend"

    @property
    def frontend_source_path(self) -> Path:
        return self.created_project_path / "frontend"

    @property
    def contracts_path(self) -> Path:
        return self.created_project_path / "contracts"

    @property
    def readme_path(self) -> Path:
        return self.front_dir / "README.md"

    @property
    def entry_script_path(self) -> Path:
        """Built entry point of the external scaffolder."""
        return self.temp_repo_dir / self.entry_script


class StarterConfig(BaseModel):
    """Global Polkadot Cloud Starter configuration.

    Created once by the CLI entry point (from a JSON file or the
    environment) and passed to the scaffolder and the frontend pipeline.
    """

    repo_url: str = Field(default=DEFAULT_REPO_URL, min_length=1)
    tool_name: str = Field(
        default=DEFAULT_TOOL_NAME,
        min_length=1,
        description="Names the temporary clone directory and the generator error prefix",
    )
    template: str = Field(default=DEFAULT_TEMPLATE, min_length=1)
    package_manager: str = Field(
        default="yarn", min_length=1, description="Runs install/build in the clone"
    )
    fallback_package_manager: str = Field(
        default="npm", min_length=1, description="Accepted by the validator when the primary is missing"
    )
    node_binary: str = Field(default="node", min_length=1)
    entry_script: str = Field(
        default="dist/src/bin/main.js",
        min_length=1,
        description="Scaffolder entry point, relative to the temporary clone",
    )
    front_dir_name: str = Field(default="front", min_length=1)
    show_output: bool = Field(
        default=True, description="Echo child-process output while it runs"
    )

    def paths(self, project_dir: str | Path, project_name: str) -> ProjectPaths:
        """Derive the pipeline paths for one project."""
        return ProjectPaths(
            project_dir=Path(project_dir),
            project_name=project_name,
            front_dir_name=self.front_dir_name,
            tool_name=self.tool_name,
            entry_script=self.entry_script,
        )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "StarterConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "StarterConfig":
        """Build a ``StarterConfig`` from environment variables.

        Recognised variables (all optional):
            POLKADOT_STARTER_REPO_URL, POLKADOT_STARTER_TEMPLATE,
            POLKADOT_STARTER_PACKAGE_MANAGER,
            POLKADOT_STARTER_FALLBACK_PACKAGE_MANAGER,
            POLKADOT_STARTER_SHOW_OUTPUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("POLKADOT_STARTER_REPO_URL"):
            kwargs["repo_url"] = os.environ["POLKADOT_STARTER_REPO_URL"]
        if os.environ.get("POLKADOT_STARTER_TEMPLATE"):
            kwargs["template"] = os.environ["POLKADOT_STARTER_TEMPLATE"]
        if os.environ.get("POLKADOT_STARTER_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["POLKADOT_STARTER_PACKAGE_MANAGER"]
        if os.environ.get("POLKADOT_STARTER_FALLBACK_PACKAGE_MANAGER"):
            kwargs["fallback_package_manager"] = os.environ[
                "POLKADOT_STARTER_FALLBACK_PACKAGE_MANAGER"
            ]
        if os.environ.get("POLKADOT_STARTER_SHOW_OUTPUT"):
            flag = os.environ["POLKADOT_STARTER_SHOW_OUTPUT"].strip().lower()
            kwargs["show_output"] = flag not in _FALSE_VALUES

        return cls(**kwargs)
