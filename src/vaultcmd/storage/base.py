"""File adapter protocol shared by the vault and the home-scoped stores."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileAdapter(Protocol):
    """Async file access relative to an adapter-owned base directory.

    Paths are POSIX-style and relative to the adapter's base.
    """

    async def list_files_recursive(self, path: str) -> list[str]:
        """List regular files under path, recursively. Missing path → []."""
        ...

    async def read(self, path: str) -> str: ...

    async def write(self, path: str, content: str) -> None:
        """Write content, creating parent directories as needed."""
        ...

    async def delete(self, path: str) -> None: ...

    async def exists(self, path: str) -> bool: ...

    async def remove_tree(self, path: str) -> None:
        """Remove a file or a directory with everything below it."""
        ...
