"""Merged view over the global (~/.claude/commands) and vault command stores."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vaultcmd.commands.merge import merge_by_name

if TYPE_CHECKING:
    from vaultcmd.commands.base import SlashCommand
    from vaultcmd.commands.store import CommandStore

logger = logging.getLogger(__name__)


class CommandLibrary:
    """Loads both scopes and merges them; writes go to the vault only."""

    def __init__(self, vault: CommandStore, global_store: CommandStore | None = None) -> None:
        self.vault = vault
        self.global_store = global_store

    async def load_all(self) -> list[SlashCommand]:
        global_commands = await self.global_store.load_all() if self.global_store else []
        vault_commands = await self.vault.load_all()
        merged = merge_by_name(global_commands, vault_commands)
        logger.debug(
            "Loaded %d commands (%d global, %d vault)",
            len(merged),
            len(global_commands),
            len(vault_commands),
        )
        return merged

    async def get(self, name: str) -> SlashCommand | None:
        for command in await self.load_all():
            if command.name == name:
                return command
        return None

    async def save(self, command: SlashCommand) -> str:
        return await self.vault.save(command)

    async def delete(self, command_id: str) -> bool:
        return await self.vault.delete(command_id)

    async def has_commands(self) -> bool:
        return await self.vault.exists()
