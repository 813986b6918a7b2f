"""Filesystem helpers for project scaffolding and frontend reorganisation.

Blocking calls run in worker threads via ``asyncio.to_thread``. Operations
over independent paths (directory creation, file writes, cleanup) fan out
with ``asyncio.gather``.

Only ``safe_remove`` and ``cleanup_temp_files`` swallow errors; every other
helper propagates them.
"""

from __future__ import annotations

import asyncio
import os
import shutil
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .utils import print_step, print_success, print_warning


@dataclass(frozen=True)
class FileToWrite:
    """A file to be written by ``write_files``."""

    path: Path
    content: str


# ---------------------------------------------------------------------------
# Synchronous primitives
# ---------------------------------------------------------------------------


def _exists(path: Path) -> bool:
    # lstat so a dangling symlink still counts as present and gets removed
    try:
        os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def _remove_path(path: Path) -> None:
    """Remove a file, symlink or directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def _move_path(source: Path, destination: Path) -> None:
    """Move *source* to *destination*, replacing whatever is already there."""
    if _exists(destination):
        _remove_path(destination)
    shutil.move(str(source), str(destination))


def _write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Async helpers
# ---------------------------------------------------------------------------


async def path_exists(path: str | Path) -> bool:
    """Return whether *path* exists.

    Only "not found" answers ``False``. Any other ``OSError`` (for example
    ``PermissionError`` on a parent directory) propagates so that callers
    can tell an inaccessible path from a missing one.
    """
    return await asyncio.to_thread(_exists, Path(path))


async def ensure_directories(directories: Iterable[str | Path]) -> None:
    """Create every directory in *directories*, including missing parents.

    Directories that already exist are left alone.
    """
    await asyncio.gather(
        *(
            asyncio.to_thread(Path(directory).mkdir, parents=True, exist_ok=True)
            for directory in directories
        )
    )


async def move_directory_contents(source_dir: str | Path, dest_dir: str | Path) -> None:
    """Move each direct child of *source_dir* into *dest_dir*.

    Entries already present in *dest_dir* under the same name are replaced.
    Children are moved one at a time; a failure part-way leaves the earlier
    children moved.

    Raises:
        FileNotFoundError: If *source_dir* does not exist.
    """
    source = Path(source_dir)
    destination = Path(dest_dir)

    if not await path_exists(source):
        raise FileNotFoundError(f"Source path does not exist: {source}")

    items = await asyncio.to_thread(lambda: sorted(source.iterdir()))
    for item in items:
        await asyncio.to_thread(_move_path, item, destination / item.name)

    print_success(f"Moved contents from {source} to {destination}")


async def safe_remove(path: str | Path) -> None:
    """Remove *path* recursively if it exists.

    Never raises: a missing path is a no-op and a failed removal is reported
    as a warning.
    """
    target = Path(path)
    try:
        if await path_exists(target):
            await asyncio.to_thread(_remove_path, target)
            print_success(f"Removed: {target}")
    except OSError as exc:
        print_warning(f"Warning: Failed to remove {target}: {exc}")


async def write_files(files: Iterable[FileToWrite]) -> None:
    """Write all *files* concurrently. The first failure propagates."""
    await asyncio.gather(
        *(asyncio.to_thread(_write_text, Path(f.path), f.content) for f in files)
    )


async def cleanup_temp_files(paths: Iterable[str | Path]) -> None:
    """Best-effort removal of temporary *paths*, all at once."""
    print_step("Cleaning up temporary files...")

    async def _cleanup(path: str | Path) -> None:
        try:
            await safe_remove(path)
        except Exception as exc:
            print_warning(f"Warning: Failed to clean up {path}: {exc}")

    await asyncio.gather(*(_cleanup(p) for p in paths))
    print_success("Temporary files cleaned up!")
