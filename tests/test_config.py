"""Tests for configuration loading."""

import pytest
from pathlib import Path

from vaultcmd.config import load_config

ENV_KEYS = [
    "VAULTCMD_VAULT_DIR",
    "VAULTCMD_HOME_DIR",
    "VAULTCMD_FETCH_TIMEOUT",
    "VAULTCMD_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self, tmp_path: Path):
        config = load_config()
        assert config.vault_dir == tmp_path
        assert config.home_dir == tmp_path / "home"
        assert config.commands_path == ".claude/commands"
        assert config.skills_path == ".claude/skills"
        assert config.fetch.timeout == 30
        assert config.log_level == "INFO"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VAULTCMD_VAULT_DIR", str(tmp_path / "vault"))
        monkeypatch.setenv("VAULTCMD_FETCH_TIMEOUT", "5")

        config = load_config()
        assert config.vault_dir == tmp_path / "vault"
        assert config.fetch.timeout == 5

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "custom.toml"
        toml_path.write_text("""
vault_dir = "/srv/vault"
commands_path = "cmds"
log_level = "DEBUG"

[fetch]
timeout = 12
user_agent = "tester"
""")
        config = load_config(toml_path)
        assert config.vault_dir == Path("/srv/vault")
        assert config.commands_path == "cmds"
        assert config.log_level == "DEBUG"
        assert config.fetch.timeout == 12
        assert config.fetch.user_agent == "tester"

    def test_toml_discovered_in_cwd(self, tmp_path: Path):
        (tmp_path / "vaultcmd.toml").write_text('skills_path = "my/skills"\n')
        config = load_config()
        assert config.skills_path == "my/skills"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VAULTCMD_LOG_LEVEL", "WARNING")

        toml_path = tmp_path / "vaultcmd.toml"
        toml_path.write_text('log_level = "DEBUG"\n')
        config = load_config(toml_path)
        assert config.log_level == "WARNING"  # env wins
