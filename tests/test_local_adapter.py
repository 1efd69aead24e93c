"""Tests for the OS directory file adapter."""

import os
from pathlib import Path

import pytest

from vaultcmd.storage.base import FileAdapter
from vaultcmd.storage.local import LocalFileAdapter


@pytest.fixture
def adapter(tmp_path: Path) -> LocalFileAdapter:
    return LocalFileAdapter(tmp_path)


class TestLocalFileAdapter:
    def test_satisfies_protocol(self, adapter: LocalFileAdapter):
        assert isinstance(adapter, FileAdapter)

    @pytest.mark.asyncio
    async def test_missing_root_lists_empty(self, adapter: LocalFileAdapter):
        assert await adapter.list_files_recursive("does/not/exist") == []

    @pytest.mark.asyncio
    async def test_write_creates_parents(self, adapter: LocalFileAdapter, tmp_path: Path):
        await adapter.write("a/b/c.md", "hello")
        assert (tmp_path / "a" / "b" / "c.md").read_text(encoding="utf-8") == "hello"
        assert await adapter.read("a/b/c.md") == "hello"
        # No temp files left behind
        assert sorted(p.name for p in (tmp_path / "a" / "b").iterdir()) == ["c.md"]

    @pytest.mark.asyncio
    async def test_write_keeps_newlines(self, adapter: LocalFileAdapter, tmp_path: Path):
        await adapter.write("x.md", "a\r\nb\n")
        assert (tmp_path / "x.md").read_bytes() == b"a\r\nb\n"

    @pytest.mark.asyncio
    async def test_recursive_listing(self, adapter: LocalFileAdapter):
        await adapter.write("root/one.md", "1")
        await adapter.write("root/sub/two.md", "2")
        await adapter.write("root/sub/deeper/three.txt", "3")
        assert await adapter.list_files_recursive("root") == [
            "root/one.md",
            "root/sub/deeper/three.txt",
            "root/sub/two.md",
        ]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    @pytest.mark.asyncio
    async def test_symlinks_not_followed(self, adapter: LocalFileAdapter, tmp_path: Path):
        await adapter.write("root/real.md", "1")
        await adapter.write("elsewhere/linked.md", "2")
        os.symlink(tmp_path / "elsewhere", tmp_path / "root" / "dirlink")
        os.symlink(tmp_path / "root" / "real.md", tmp_path / "root" / "filelink.md")
        assert await adapter.list_files_recursive("root") == ["root/real.md"]

    @pytest.mark.asyncio
    async def test_delete_and_exists(self, adapter: LocalFileAdapter):
        await adapter.write("x.md", "1")
        assert await adapter.exists("x.md")
        await adapter.delete("x.md")
        assert not await adapter.exists("x.md")

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, adapter: LocalFileAdapter):
        with pytest.raises(FileNotFoundError):
            await adapter.delete("missing.md")

    @pytest.mark.asyncio
    async def test_remove_tree(self, adapter: LocalFileAdapter, tmp_path: Path):
        await adapter.write("skills/s/SKILL.md", "1")
        await adapter.write("skills/s/extra/file.txt", "2")
        await adapter.remove_tree("skills/s")
        assert not (tmp_path / "skills" / "s").exists()

    def test_rejects_escaping_paths(self, adapter: LocalFileAdapter):
        with pytest.raises(ValueError):
            adapter._abs("../outside.md")
        with pytest.raises(ValueError):
            adapter._abs("/etc/passwd")
