"""Tests for frontmatter parsing and serialization."""

import pytest

from vaultcmd.commands.base import SlashCommand
from vaultcmd.commands.parser import (
    parse_command_content,
    serialize_command,
    split_header,
    yaml_string,
)
from vaultcmd.errors import CommandParseError

FULL_FILE = (
    "---\n"
    "description: Review code for issues\n"
    'argument-hint: "[file] [focus]"\n'
    "allowed-tools:\n"
    "  - Read\n"
    "  - Grep\n"
    "model: claude-sonnet-4-5\n"
    "---\n"
    "Your prompt content here with $ARGUMENTS placeholder"
)


class TestParse:
    def test_full_header(self):
        parsed = parse_command_content(FULL_FILE)
        assert parsed.description == "Review code for issues"
        assert parsed.argument_hint == "[file] [focus]"
        assert parsed.allowed_tools == ["Read", "Grep"]
        assert parsed.model == "claude-sonnet-4-5"
        assert parsed.body == "Your prompt content here with $ARGUMENTS placeholder"

    def test_no_header_keeps_text_verbatim(self):
        text = "  Just a prompt\n\nwith lines  \n"
        parsed = parse_command_content(text)
        assert parsed.header == {}
        assert parsed.body == text

    def test_unclosed_header_is_body(self):
        text = "---\ndescription: dangling\nno closing line"
        parsed = parse_command_content(text)
        assert parsed.header == {}
        assert parsed.body == text

    def test_empty_header(self):
        parsed = parse_command_content("---\n---\nbody")
        assert parsed.header == {}
        assert parsed.body == "body"

    def test_body_kept_verbatim(self):
        parsed = parse_command_content("---\nmodel: opus\n---\n\n  indented\n\n")
        assert parsed.body == "\n  indented\n\n"

    def test_crlf_delimiters(self):
        parsed = parse_command_content("---\r\ndescription: hi\r\n---\r\nbody")
        assert parsed.description == "hi"
        assert parsed.body == "body"

    def test_scalar_tools_become_list(self):
        parsed = parse_command_content("---\nallowed-tools: Read\n---\n")
        assert parsed.allowed_tools == ["Read"]

    def test_empty_tools_is_none(self):
        parsed = parse_command_content("---\nallowed-tools: []\n---\n")
        assert parsed.allowed_tools is None

    def test_non_string_scalars_coerced(self):
        parsed = parse_command_content("---\ndescription: 42\n---\n")
        assert parsed.description == "42"

    def test_invalid_yaml_raises(self):
        with pytest.raises(CommandParseError) as exc_info:
            parse_command_content("---\ndescription: [unclosed\n---\nbody", path="bad.md")
        assert exc_info.value.path == "bad.md"

    def test_non_mapping_header_raises(self):
        with pytest.raises(CommandParseError, match="mapping"):
            parse_command_content("---\n- a\n- b\n---\nbody")

    def test_skill_name_field(self):
        parsed = parse_command_content("---\nname: pdf-tools\n---\n# PDF")
        assert parsed.name == "pdf-tools"


class TestSplitHeader:
    def test_no_header(self):
        assert split_header("plain") == (None, "plain")

    def test_header(self):
        raw, body = split_header("---\na: 1\n---\nrest")
        assert raw == "a: 1\n"
        assert body == "rest"


class TestYamlString:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("plain text", "plain text"),
            ("claude-sonnet-4-5", "claude-sonnet-4-5"),
            ("a: b", '"a: b"'),
            ("issue #12", '"issue #12"'),
            (" leading", '" leading"'),
            ("trailing ", '"trailing "'),
            ('say "hi": now', '"say \\"hi\\": now"'),
            ("two\nlines", '"two\\nlines"'),
            ("true", '"true"'),
            ("42", '"42"'),
            ("[file] [focus]", '"[file] [focus]"'),
            ("a\x07b", '"a\\x07b"'),
            ("x\u2028y", '"x\\u2028y"'),
        ],
    )
    def test_quoting(self, value: str, expected: str):
        assert yaml_string(value) == expected


class TestSerialize:
    def test_field_order_and_format(self):
        command = SlashCommand(
            id="cmd-review",
            name="review",
            description="Review code for issues",
            argument_hint="[file] [focus]",
            allowed_tools=["Read", "Grep"],
            model="claude-sonnet-4-5",
            content="Your prompt content here with $ARGUMENTS placeholder",
        )
        assert serialize_command(command) == FULL_FILE

    def test_empty_fields_omitted(self):
        command = SlashCommand(
            id="cmd-x", name="x", description="", allowed_tools=[], content="Body"
        )
        assert serialize_command(command) == "---\n---\nBody"

    def test_existing_header_in_content_stripped(self):
        command = SlashCommand(
            id="cmd-x",
            name="x",
            model="opus",
            content="---\ndescription: stale\n---\nBody",
        )
        assert serialize_command(command) == "---\nmodel: opus\n---\nBody"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "command",
        [
            SlashCommand(id="cmd-a", name="a", content="Only a body.\n"),
            SlashCommand(id="cmd-b", name="b", description="One field", content="Body"),
            SlashCommand(
                id="cmd-c",
                name="c",
                description='He said "x": y #tag',
                argument_hint="line1\nline2",
                allowed_tools=["Bash(git:*)", "Read", "true"],
                model="claude-opus-4",
                content="\n\nLine 1\n\n  Line 3\n",
            ),
        ],
        ids=["zero-fields", "one-field", "all-fields"],
    )
    def test_serialize_then_parse(self, command: SlashCommand):
        parsed = parse_command_content(serialize_command(command))
        assert parsed.description == command.description
        assert parsed.argument_hint == command.argument_hint
        assert parsed.allowed_tools == command.allowed_tools
        assert parsed.model == command.model
        assert parsed.body == command.content

    def test_reserialize_is_stable(self):
        text = serialize_command(
            SlashCommand(id="cmd-x", name="x", description="a: b", content="Body")
        )
        parsed = parse_command_content(text)
        again = serialize_command(
            SlashCommand(
                id="cmd-x",
                name="x",
                description=parsed.description,
                content=parsed.body,
            )
        )
        assert again == text

    @pytest.mark.parametrize("value", ["a\x07b", "x\u2028y", "tab\x85next", "\ufeffbom"])
    def test_control_and_separator_chars(self, value: str):
        text = serialize_command(
            SlashCommand(id="cmd-x", name="x", description=value, model=value, content="Body")
        )
        parsed = parse_command_content(text)
        assert parsed.description == value
        assert parsed.model == value
        assert parsed.body == "Body"
