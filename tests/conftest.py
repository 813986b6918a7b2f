"""Shared pytest fixtures for the Polkadot Cloud Starter test suite.

Provides reusable fixtures for:
- Temporary project directories
- A default configuration with child-process echo disabled
- Mock subprocess helpers
- Canned ``CommandResult`` values
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from polkadot_starter.config import StarterConfig
from polkadot_starter.process import CommandResult


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary project root containing an empty ``front/`` directory."""
    project_dir = tmp_path / "demo"
    (project_dir / "front").mkdir(parents=True)
    yield project_dir


@pytest.fixture
def quiet_config() -> StarterConfig:
    """Default configuration that does not echo child-process output."""
    return StarterConfig(show_output=False)


# ---------------------------------------------------------------------------
# Command results
# ---------------------------------------------------------------------------

@pytest.fixture
def ok_result():
    """Factory for a successful ``CommandResult``."""
    def factory(stdout: str = "", stderr: str = "") -> CommandResult:
        return CommandResult(stdout=stdout, stderr=stderr, exit_code=0)

    return factory


@pytest.fixture
def failed_result():
    """Factory for a failed ``CommandResult``."""
    def factory(stderr: str = "error", exit_code: int = 1, stdout: str = "") -> CommandResult:
        return CommandResult(stdout=stdout, stderr=stderr, exit_code=exit_code)

    return factory


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

def _mock_stream(data: bytes) -> MagicMock:
    stream = MagicMock()
    stream.read = AsyncMock(side_effect=[data, b""] if data else [b""])
    return stream


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> MagicMock:
        mock_proc = MagicMock()
        mock_proc.stdout = _mock_stream(stdout.encode("utf-8"))
        mock_proc.stderr = _mock_stream(stderr.encode("utf-8"))
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
