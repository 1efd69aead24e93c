"""VaultCmd façade — wires configuration to adapters, stores and managers.

Two scopes share one adapter implementation:
1. Vault scope: rooted at the vault directory, read/write
2. Global scope: rooted at the user's home, read-only from here
"""

from __future__ import annotations

import logging

from vaultcmd.commands.codec import PathIdentityCodec
from vaultcmd.commands.library import CommandLibrary
from vaultcmd.commands.store import CommandStore
from vaultcmd.config import VaultCmdConfig
from vaultcmd.session.state import SessionAttachmentState
from vaultcmd.skills.fetch import SkillFetcher
from vaultcmd.skills.installer import SkillManager
from vaultcmd.storage.local import LocalFileAdapter

logger = logging.getLogger(__name__)

VAULT_ID_PREFIX = "cmd-"
GLOBAL_ID_PREFIX = "global-cmd-"


class VaultCmd:
    """Entry object for a vault: commands, skills and session state."""

    def __init__(self, config: VaultCmdConfig) -> None:
        self.config = config
        self.vault_adapter = LocalFileAdapter(config.vault_dir)
        self.home_adapter = LocalFileAdapter(config.home_dir)

        self.commands = CommandLibrary(
            vault=CommandStore(
                self.vault_adapter,
                root=config.commands_path,
                codec=PathIdentityCodec(prefix=VAULT_ID_PREFIX),
            ),
            global_store=CommandStore(
                self.home_adapter,
                root=config.commands_path,
                codec=PathIdentityCodec(prefix=GLOBAL_ID_PREFIX),
            ),
        )
        self.skills = SkillManager(
            self.vault_adapter,
            global_adapter=self.home_adapter,
            fetcher=SkillFetcher(
                timeout=config.fetch.timeout,
                user_agent=config.fetch.user_agent,
            ),
            skills_path=config.skills_path,
        )
        self.session = SessionAttachmentState()
        logger.debug("VaultCmd ready (vault=%s, home=%s)", config.vault_dir, config.home_dir)
