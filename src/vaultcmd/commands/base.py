"""Slash command entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SlashCommand:
    """A command definition loaded from (or destined for) a Markdown file."""

    id: str
    name: str
    content: str = ""
    description: str | None = None
    argument_hint: str | None = None
    allowed_tools: list[str] | None = None
    model: str | None = None
