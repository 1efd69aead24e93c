"""OS directory adapter.

Backs both scopes: the vault adapter is rooted at the vault directory, the
home-scoped adapter at the user's home. Blocking filesystem calls run in a
worker thread so callers can await them like any other I/O.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import tempfile
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


class LocalFileAdapter:
    """FileAdapter over a real directory."""

    def __init__(self, base: Path) -> None:
        self.base = Path(base)

    def _abs(self, path: str) -> Path:
        rel = PurePosixPath(path)
        if rel.is_absolute() or ".." in rel.parts:
            raise ValueError(f"Path escapes adapter base: {path}")
        return self.base.joinpath(*rel.parts)

    # ── Listing ───────────────────────────────────────────────

    async def list_files_recursive(self, path: str) -> list[str]:
        return await asyncio.to_thread(self._list_sync, path)

    def _list_sync(self, path: str) -> list[str]:
        root = self._abs(path)
        files: list[str] = []

        def walk(current: Path, rel: PurePosixPath) -> None:
            with os.scandir(current) as entries:
                for entry in sorted(entries, key=lambda e: e.name):
                    # Symlinks, sockets and the like are neither walked nor listed
                    if entry.is_dir(follow_symlinks=False):
                        walk(Path(entry.path), rel / entry.name)
                    elif entry.is_file(follow_symlinks=False):
                        files.append(str(rel / entry.name))

        if not root.is_dir():
            return files
        walk(root, PurePosixPath(path))
        return files

    # ── Read / write ──────────────────────────────────────────

    async def read(self, path: str) -> str:
        return await asyncio.to_thread(self._abs(path).read_text, encoding="utf-8")

    async def write(self, path: str, content: str) -> None:
        await asyncio.to_thread(self._write_sync, self._abs(path), content)

    def _write_sync(self, target: Path, content: str) -> None:
        """Write via temp file + rename so readers never see a partial file."""
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=str(target.parent), prefix=".tmp_", suffix=target.suffix)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            os.replace(temp_path, target)
        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    async def delete(self, path: str) -> None:
        await asyncio.to_thread(self._abs(path).unlink)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._abs(path).exists)

    async def remove_tree(self, path: str) -> None:
        await asyncio.to_thread(self._remove_tree_sync, self._abs(path))

    def _remove_tree_sync(self, target: Path) -> None:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
        logger.debug("Removed %s", target)
