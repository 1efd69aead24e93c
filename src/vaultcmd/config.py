"""Configuration loading from environment variables and vaultcmd.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "vaultcmd.toml"


@dataclass
class FetchConfig:
    """Remote skill download settings."""

    timeout: float = 30
    user_agent: str = "vaultcmd"


@dataclass
class VaultCmdConfig:
    """Top-level configuration."""

    vault_dir: Path = field(default_factory=Path.cwd)
    home_dir: Path = field(default_factory=Path.home)
    commands_path: str = ".claude/commands"
    skills_path: str = ".claude/skills"
    fetch: FetchConfig = field(default_factory=FetchConfig)
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> VaultCmdConfig:
    """Load configuration from environment variables and optional vaultcmd.toml.

    Priority: environment variables > vaultcmd.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.claude/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".claude" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    fetch_data = file_data.get("fetch", {})

    vault_dir = os.getenv("VAULTCMD_VAULT_DIR", file_data.get("vault_dir"))
    home_dir = os.getenv("VAULTCMD_HOME_DIR", file_data.get("home_dir"))

    return VaultCmdConfig(
        vault_dir=Path(vault_dir).expanduser() if vault_dir else Path.cwd(),
        home_dir=Path(home_dir).expanduser() if home_dir else Path.home(),
        commands_path=file_data.get("commands_path", ".claude/commands"),
        skills_path=file_data.get("skills_path", ".claude/skills"),
        fetch=FetchConfig(
            timeout=float(os.getenv("VAULTCMD_FETCH_TIMEOUT", fetch_data.get("timeout", 30))),
            user_agent=fetch_data.get("user_agent", "vaultcmd"),
        ),
        log_level=os.getenv("VAULTCMD_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
