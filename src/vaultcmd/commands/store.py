"""Scoped command store — one instance per scope root.

Markdown files under the root are the source of truth; there is no index.
Ids are recomputed from paths on every lookup, so renaming a file on disk is
picked up on the next enumeration.
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from vaultcmd.commands.base import SlashCommand
from vaultcmd.commands.codec import PathIdentityCodec
from vaultcmd.commands.parser import parse_command_content, serialize_command
from vaultcmd.errors import CommandDeleteError, CommandWriteError

if TYPE_CHECKING:
    from vaultcmd.storage.base import FileAdapter

logger = logging.getLogger(__name__)

COMMANDS_PATH = ".claude/commands"

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_/-]")


class CommandStore:
    """CRUD over one scope's command tree."""

    def __init__(
        self,
        adapter: FileAdapter,
        root: str = COMMANDS_PATH,
        codec: PathIdentityCodec | None = None,
    ) -> None:
        self.adapter = adapter
        self.root = root.rstrip("/")
        self.codec = codec or PathIdentityCodec()

    # ── Paths & identity ──────────────────────────────────────

    def _is_command_file(self, path: str) -> bool:
        return path.endswith(self.codec.extension)

    def relative_path(self, file_path: str) -> str:
        """Path relative to the scope root (files outside the root pass through)."""
        try:
            return str(PurePosixPath(file_path).relative_to(self.root))
        except ValueError:
            return file_path

    def id_for_path(self, file_path: str) -> str:
        return self.codec.encode(self.relative_path(file_path))

    def name_for_path(self, file_path: str) -> str:
        # .claude/commands/nested/foo.md -> nested/foo
        return self.codec.name_from_path(self.relative_path(file_path))

    def file_path_for(self, command: SlashCommand) -> str:
        """review-code -> .claude/commands/review-code.md; nested names keep slashes."""
        safe_name = _UNSAFE_NAME_CHARS.sub("-", command.name)
        return f"{self.root}/{safe_name}{self.codec.extension}"

    def path_for_id(self, command_id: str) -> str:
        return f"{self.root}/{self.codec.decode(command_id)}{self.codec.extension}"

    # ── Loading ───────────────────────────────────────────────

    async def _list_command_files(self) -> list[str]:
        files = await self.adapter.list_files_recursive(self.root)
        return [f for f in files if self._is_command_file(f)]

    async def load_all(self) -> list[SlashCommand]:
        """Load every command under the root; bad files are logged and skipped."""
        commands: list[SlashCommand] = []
        try:
            files = await self._list_command_files()
        except Exception:
            logger.exception("Failed to list command files under %s", self.root)
            return commands

        for file_path in files:
            try:
                commands.append(await self.load_from_file(file_path))
            except Exception as exc:
                logger.error("Failed to load command from %s: %s", file_path, exc)
        return commands

    async def load_from_file(self, file_path: str) -> SlashCommand:
        content = await self.adapter.read(file_path)
        return self.parse_file(content, file_path)

    def parse_file(self, content: str, file_path: str) -> SlashCommand:
        parsed = parse_command_content(content, path=file_path)
        return SlashCommand(
            id=self.id_for_path(file_path),
            name=self.name_for_path(file_path),
            description=parsed.description,
            argument_hint=parsed.argument_hint,
            allowed_tools=parsed.allowed_tools,
            model=parsed.model,
            content=parsed.body,
        )

    # ── Writing ───────────────────────────────────────────────

    async def save(self, command: SlashCommand) -> str:
        """Write the command file and return its path."""
        file_path = self.file_path_for(command)
        try:
            await self.adapter.write(file_path, serialize_command(command))
        except Exception as exc:
            raise CommandWriteError(f"Failed to save command '{command.name}': {exc}") from exc
        logger.info("Saved command %s -> %s", command.name, file_path)
        return file_path

    async def delete(self, command_id: str) -> bool:
        """Delete the file whose derived id matches. Unknown ids are a no-op.

        Returns True if a file was removed.
        """
        try:
            files = await self._list_command_files()
        except Exception as exc:
            raise CommandDeleteError(f"Failed to list commands for deletion: {exc}") from exc

        for file_path in files:
            if self.id_for_path(file_path) != command_id:
                continue
            try:
                await self.adapter.delete(file_path)
            except Exception as exc:
                raise CommandDeleteError(f"Failed to delete {file_path}: {exc}") from exc
            logger.info("Deleted command %s (%s)", command_id, file_path)
            return True

        logger.debug("No command file matches id %s", command_id)
        return False

    async def exists(self) -> bool:
        """True if at least one command file exists anywhere under the root."""
        return bool(await self._list_command_files())
