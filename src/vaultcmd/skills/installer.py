"""Skill listing and installation.

A skill is a directory holding a SKILL.md, found under `.claude/skills/` in
the vault and in the user's home. Vault skills shadow global skills of the
same name, exactly like commands.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from vaultcmd.commands.merge import merge_by_name
from vaultcmd.commands.parser import parse_command_content
from vaultcmd.errors import CommandParseError, SkillInstallError, SkillNotFoundError
from vaultcmd.skills.bundled import BUILT_IN_SKILLS, BUNDLED_SKILLS

if TYPE_CHECKING:
    from vaultcmd.skills.fetch import SkillFetcher
    from vaultcmd.storage.base import FileAdapter

logger = logging.getLogger(__name__)

SKILLS_PATH = ".claude/skills"
SKILL_FILENAME = "SKILL.md"
NO_DESCRIPTION = "No description available"

_UNSAFE_SKILL_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


@dataclass
class InstalledSkill:
    """A skill found on disk."""

    name: str
    description: str
    path: str
    is_built_in: bool = False
    is_global: bool = False


def sanitize_skill_name(name: str) -> str:
    return _UNSAFE_SKILL_CHARS.sub("-", name.strip()).lower()


def _sort_key(skill: InstalledSkill) -> tuple[bool, bool, str]:
    # Built-in first, then global, then alphabetical
    return (not skill.is_built_in, not skill.is_global, skill.name.casefold())


class SkillManager:
    """List, install and remove skills across the vault and global scopes."""

    def __init__(
        self,
        vault: FileAdapter,
        global_adapter: FileAdapter | None = None,
        fetcher: SkillFetcher | None = None,
        skills_path: str = SKILLS_PATH,
    ) -> None:
        self.vault = vault
        self.global_adapter = global_adapter
        self.fetcher = fetcher
        self.skills_path = skills_path.rstrip("/")

    def _skill_dir(self, name: str) -> str:
        return f"{self.skills_path}/{name}"

    def _skill_file(self, name: str) -> str:
        return f"{self._skill_dir(name)}/{SKILL_FILENAME}"

    # ── Listing ───────────────────────────────────────────────

    async def _load_scope(self, adapter: FileAdapter, is_global: bool) -> list[InstalledSkill]:
        skills: list[InstalledSkill] = []
        try:
            files = await adapter.list_files_recursive(self.skills_path)
        except Exception:
            logger.exception("Failed to list skills under %s", self.skills_path)
            return skills

        for file_path in files:
            rel = PurePosixPath(file_path).relative_to(self.skills_path)
            if len(rel.parts) != 2 or rel.parts[1] != SKILL_FILENAME:
                continue
            name = rel.parts[0]
            skills.append(
                InstalledSkill(
                    name=name,
                    description=await self._read_description(adapter, file_path),
                    path=self._skill_dir(name),
                    is_built_in=name in BUILT_IN_SKILLS,
                    is_global=is_global,
                )
            )
        return skills

    async def _read_description(self, adapter: FileAdapter, file_path: str) -> str:
        try:
            parsed = parse_command_content(await adapter.read(file_path), path=file_path)
        except (OSError, UnicodeDecodeError, CommandParseError) as exc:
            logger.warning("Unreadable skill file %s: %s", file_path, exc)
            return NO_DESCRIPTION
        return (parsed.description or "").strip() or NO_DESCRIPTION

    async def installed(self) -> list[InstalledSkill]:
        """All skills, vault overriding global by name, sorted for display."""
        global_skills = (
            await self._load_scope(self.global_adapter, is_global=True)
            if self.global_adapter
            else []
        )
        vault_skills = await self._load_scope(self.vault, is_global=False)
        return sorted(merge_by_name(global_skills, vault_skills), key=_sort_key)

    # ── Bundled skills ────────────────────────────────────────

    async def is_bundled_installed(self) -> bool:
        return await self.vault.exists(self._skill_dir("obsidian-markdown"))

    async def install_bundled(self) -> list[str]:
        installed: list[str] = []
        for name, content in BUNDLED_SKILLS.items():
            await self._write_skill(name, content)
            installed.append(name)
        logger.info("Installed bundled skills: %s", ", ".join(installed))
        return installed

    async def uninstall_bundled(self) -> None:
        for name in BUNDLED_SKILLS:
            skill_dir = self._skill_dir(name)
            if not await self.vault.exists(skill_dir):
                continue
            try:
                await self.vault.remove_tree(skill_dir)
            except OSError as exc:
                raise SkillInstallError(f"Failed to remove skill '{name}': {exc}") from exc
        logger.info("Removed bundled skills")

    # ── Install / remove ──────────────────────────────────────

    async def remove(self, name: str) -> None:
        """Remove a vault skill. Global skills are never touched."""
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise SkillNotFoundError(f'Skill "{name}" not found')
        skill_dir = self._skill_dir(name)
        if not await self.vault.exists(skill_dir):
            raise SkillNotFoundError(f'Skill "{name}" not found')
        try:
            await self.vault.remove_tree(skill_dir)
        except OSError as exc:
            raise SkillInstallError(f"Failed to remove skill '{name}': {exc}") from exc
        logger.info('Skill "%s" removed', name)

    async def install_from_url(self, url: str) -> str:
        """Download a SKILL.md and install it into the vault. Returns the skill name."""
        if self.fetcher is None:
            raise SkillInstallError("No fetcher configured for remote skill installs")

        raw_url = await self.fetcher.resolve(url)
        logger.info("Downloading skill from %s", raw_url)
        content = await self.fetcher.fetch_text(raw_url)

        name = sanitize_skill_name(self._skill_name(content, url))
        if not name:
            raise SkillInstallError(
                'Could not determine skill name. Ensure the SKILL.md has a "name" field in frontmatter.'
            )
        await self._write_skill(name, content)
        logger.info('Skill "%s" installed from %s', name, url)
        return name

    def _skill_name(self, content: str, url: str) -> str:
        try:
            declared = parse_command_content(content).name
        except CommandParseError:
            declared = None
        if declared and declared.strip():
            return declared
        # Fall back to the last URL segment
        last = url.rstrip("/").split("/")[-1]
        return re.sub(r"\.md$", "", last, flags=re.IGNORECASE) or "unknown-skill"

    async def _write_skill(self, name: str, content: str) -> None:
        try:
            await self.vault.write(self._skill_file(name), content)
        except OSError as exc:
            raise SkillInstallError(f"Failed to install skill '{name}': {exc}") from exc
