"""Exception taxonomy.

Bulk reads contain their failures (log + skip); explicit user actions
(save, delete, install, remove) raise one of these so the caller can react.
Wrapped errors are chained with ``raise ... from exc``.
"""

from __future__ import annotations


class VaultCmdError(Exception):
    """Base for all vaultcmd errors."""


class CommandParseError(VaultCmdError):
    """A command file could not be parsed."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class CommandWriteError(VaultCmdError):
    """Writing a command file failed."""


class CommandDeleteError(VaultCmdError):
    """Deleting a command file failed."""


class SkillError(VaultCmdError):
    """Base for skill install/remove failures."""


class SkillNotFoundError(SkillError):
    """The requested skill does not exist (locally or remotely)."""


class SkillFetchError(SkillError):
    """Downloading skill content failed (transport error or bad status)."""

    def __init__(self, message: str, *, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class SkillInstallError(SkillError):
    """Writing or removing skill files failed."""
