"""External process execution for the frontend pipeline.

``execute_command`` runs a child process, echoes its output live and
returns a ``CommandResult``. A non-zero exit code is reported in the result,
never raised; only a failure to launch the executable raises. The pipeline
steps built on top of it (clone, install, build) turn a non-zero exit into a
``CommandError`` whose message embeds the captured stderr.
"""

from __future__ import annotations

import asyncio
import codecs
import shutil
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .utils import print_step, print_success

_READ_CHUNK = 4096


# ---------------------------------------------------------------------------
# Results and errors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CommandResult:
    """Captured output and exit status of one external process."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class StarterError(Exception):
    """Base class for errors raised by Polkadot Cloud Starter."""


class CommandError(StarterError):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(self, message: str, command: str = "", exit_code: int = 1, stderr: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(message)


def raise_for_result(result: CommandResult, prefix: str, command: str = "") -> None:
    """Raise ``CommandError("<prefix>: <stderr>")`` unless *result* succeeded."""
    if result.ok:
        return
    stderr = result.stderr.strip()
    raise CommandError(
        f"{prefix}: {stderr}",
        command=command,
        exit_code=result.exit_code,
        stderr=stderr,
    )


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def _pump(
    stream: asyncio.StreamReader,
    sink: TextIO,
    chunks: list[str],
    echo: bool,
) -> None:
    """Drain *stream* into *chunks*, mirroring each piece to *sink* when echoing."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        data = await stream.read(_READ_CHUNK)
        text = decoder.decode(data, final=not data)
        if text:
            chunks.append(text)
            if echo:
                sink.write(text)
                sink.flush()
        if not data:
            break


async def execute_command(
    command: str,
    args: Sequence[str] = (),
    *,
    cwd: str | Path | None = None,
    show_output: bool = True,
) -> CommandResult:
    """Run *command* with *args* and wait for it to finish.

    stdout and stderr are captured separately. While the process runs they
    are echoed to this process's own stdout/stderr unless *show_output* is
    ``False``, so the user sees the wrapped tool's progress in real time.

    Args:
        command: Executable name (looked up on ``PATH``) or path.
        args: Arguments passed to the executable.
        cwd: Working directory for the child process.
        show_output: Echo child output while it runs.

    Returns:
        The ``CommandResult``. A non-zero ``exit_code`` does not raise.

    Raises:
        OSError: If the executable cannot be started (not found, not
            executable, bad working directory).
    """
    executable = shutil.which(command) or command
    process = await asyncio.create_subprocess_exec(
        executable,
        *args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    assert process.stdout is not None and process.stderr is not None  # guaranteed by PIPE
    stdout_chunks: list[str] = []
    stderr_chunks: list[str] = []
    try:
        await asyncio.gather(
            _pump(process.stdout, sys.stdout, stdout_chunks, show_output),
            _pump(process.stderr, sys.stderr, stderr_chunks, show_output),
        )
    except BaseException:
        # Reap the child before propagating
        if process.returncode is None:
            process.kill()
        await process.wait()
        raise
    returncode = await process.wait()

    return CommandResult(
        stdout="".join(stdout_chunks),
        stderr="".join(stderr_chunks),
        exit_code=returncode,
    )


# ---------------------------------------------------------------------------
# Pipeline steps
# ---------------------------------------------------------------------------


async def clone_repository(
    repo_url: str,
    target_dir: str | Path,
    cwd: str | Path,
    *,
    show_output: bool = True,
) -> CommandResult:
    """Clone *repo_url* into *target_dir* with ``git clone``.

    Raises:
        CommandError: ``"Git clone failed: <stderr>"`` on a non-zero exit.
    """
    print_step(f"Cloning repository: {repo_url}")

    result = await execute_command(
        "git", ["clone", repo_url, str(target_dir)], cwd=cwd, show_output=show_output
    )
    raise_for_result(result, "Git clone failed", command=f"git clone {repo_url} {target_dir}")

    print_success("Repository cloned successfully!")
    return result


async def install_dependencies(
    cwd: str | Path,
    package_manager: str = "yarn",
    *,
    show_output: bool = True,
) -> CommandResult:
    """Run ``<package_manager> install`` in *cwd*.

    Raises:
        CommandError: ``"<package_manager> install failed: <stderr>"``.
    """
    print_step("Installing dependencies...")

    result = await execute_command(
        package_manager, ["install"], cwd=cwd, show_output=show_output
    )
    raise_for_result(
        result, f"{package_manager} install failed", command=f"{package_manager} install"
    )

    print_success("Dependencies installed successfully!")
    return result


async def build_project(
    cwd: str | Path,
    package_manager: str = "yarn",
    *,
    show_output: bool = True,
) -> CommandResult:
    """Run ``<package_manager> build`` in *cwd*.

    Raises:
        CommandError: ``"<package_manager> build failed: <stderr>"``.
    """
    print_step("Building the project...")

    result = await execute_command(
        package_manager, ["build"], cwd=cwd, show_output=show_output
    )
    raise_for_result(
        result, f"{package_manager} build failed", command=f"{package_manager} build"
    )

    print_success("Project built successfully!")
    return result
