"""Frontmatter parsing and serialization for command and skill files.

File format::

    ---
    description: Review code for issues
    argument-hint: "[file] [focus]"
    allowed-tools:
      - Read
      - Grep
    model: claude-sonnet-4-5
    ---
    Prompt body with $ARGUMENTS placeholder

The header is YAML (loaded through python-frontmatter's handler); the body is
kept byte-for-byte, so ``parse_command_content(serialize_command(c))`` gives
back the same fields and body.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import yaml
from frontmatter.default_handlers import YAMLHandler

from vaultcmd.errors import CommandParseError

if TYPE_CHECKING:
    from vaultcmd.commands.base import SlashCommand

_HANDLER = YAMLHandler()

# Opening delimiter on the first line, closing delimiter on a line of its own.
_HEADER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)

# Emission order is fixed.
FIELD_ORDER = ("description", "argument-hint", "allowed-tools", "model")

_NEEDS_QUOTES = (":", "#", "\n")
# Characters a YAML reader rejects or treats as line breaks
_UNPRINTABLE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f\u2028\u2029\ufeff]")


@dataclass
class ParsedCommand:
    """Header fields plus the remaining body text."""

    header: dict[str, Any] = field(default_factory=dict)
    body: str = ""

    def _scalar(self, key: str) -> str | None:
        value = self.header.get(key)
        if value is None:
            return None
        value = str(value)
        return value or None

    @property
    def description(self) -> str | None:
        return self._scalar("description")

    @property
    def argument_hint(self) -> str | None:
        return self._scalar("argument-hint")

    @property
    def model(self) -> str | None:
        return self._scalar("model")

    @property
    def name(self) -> str | None:
        return self._scalar("name")

    @property
    def allowed_tools(self) -> list[str] | None:
        value = self.header.get("allowed-tools")
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            tools = [str(v) for v in value if v is not None]
        else:
            tools = [str(value)]
        return tools or None


def split_header(text: str) -> tuple[str | None, str]:
    """Split text into (raw header, body). No header → (None, text)."""
    match = _HEADER_RE.match(text)
    if not match:
        return None, text
    return match.group(1), text[match.end() :]


def parse_command_content(text: str, *, path: str | None = None) -> ParsedCommand:
    """Parse a header block + body. Raises CommandParseError on bad YAML."""
    raw, body = split_header(text)
    if raw is None:
        return ParsedCommand({}, text)

    try:
        loaded = _HANDLER.load(raw)
    except yaml.YAMLError as exc:
        raise CommandParseError(f"Invalid frontmatter: {exc}", path=path) from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise CommandParseError(
            f"Frontmatter must be a mapping, got {type(loaded).__name__}", path=path
        )
    return ParsedCommand({str(k): v for k, v in loaded.items()}, body)


def yaml_string(value: str) -> str:
    """Quote a scalar when YAML would otherwise misread it."""
    if (
        any(token in value for token in _NEEDS_QUOTES)
        or value != value.strip()
        or _UNPRINTABLE.search(value)
        or not _reads_back(value)
    ):
        escaped = (
            value.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
            .replace("\r", "\\r")
        )
        return f'"{_UNPRINTABLE.sub(_escape_char, escaped)}"'
    return value


def _escape_char(match: re.Match[str]) -> str:
    code = ord(match.group())
    return f"\\x{code:02x}" if code < 0x100 else f"\\u{code:04x}"


def _reads_back(value: str) -> bool:
    try:
        return yaml.safe_load(value) == value
    except yaml.YAMLError:
        return False


def serialize_command(command: SlashCommand) -> str:
    """Render a command as frontmatter + body. Empty fields are omitted."""
    lines = ["---"]

    if command.description:
        lines.append(f"description: {yaml_string(command.description)}")
    if command.argument_hint:
        lines.append(f"argument-hint: {yaml_string(command.argument_hint)}")
    if command.allowed_tools:
        lines.append("allowed-tools:")
        for tool in command.allowed_tools:
            lines.append(f"  - {yaml_string(tool)}")
    if command.model:
        lines.append(f"model: {yaml_string(command.model)}")

    lines.append("---")

    # Content may still carry a header from an earlier load; keep only the body
    _, body = split_header(command.content)
    lines.append(body)

    return "\n".join(lines)
