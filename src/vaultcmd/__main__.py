"""Entry point: python -m vaultcmd [command] [arg]

- No args / "commands": list merged slash commands (global + vault)
- "show NAME":          print a command's file content
- "delete ID":          delete a vault command by id
- "skills":             list installed skills
- "install-skill URL":  install a skill from a URL
- "remove-skill NAME":  remove a vault skill
- "install-bundled":    install the bundled skills
- "uninstall-bundled":  remove the bundled skills
"""

from __future__ import annotations

import asyncio
import logging
import sys

from vaultcmd.commands.parser import serialize_command
from vaultcmd.config import load_config
from vaultcmd.core import VaultCmd
from vaultcmd.errors import VaultCmdError

USAGE = """\
Usage: python -m vaultcmd [command] [arg]
  commands            List slash commands (default)
  show NAME           Show a command
  delete ID           Delete a vault command by id
  skills              List installed skills
  install-skill URL   Install a skill from GitHub or a raw URL
  remove-skill NAME   Remove a vault skill
  install-bundled     Install the bundled skills
  uninstall-bundled   Remove the bundled skills"""


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


async def _list_commands(app: VaultCmd) -> None:
    commands = await app.commands.load_all()
    if not commands:
        print("(no commands)")
        return
    for command in commands:
        hint = f" {command.argument_hint}" if command.argument_hint else ""
        desc = f" — {command.description}" if command.description else ""
        print(f"/{command.name}{hint}{desc}  [{command.id}]")


async def _show_command(app: VaultCmd, name: str) -> int:
    command = await app.commands.get(name)
    if command is None:
        print(f"Command not found: {name}", file=sys.stderr)
        return 1
    print(serialize_command(command))
    return 0


async def _delete_command(app: VaultCmd, command_id: str) -> int:
    if await app.commands.delete(command_id):
        print(f"Deleted {command_id}")
        return 0
    print(f"No vault command with id {command_id}", file=sys.stderr)
    return 1


async def _list_skills(app: VaultCmd) -> None:
    skills = await app.skills.installed()
    if not skills:
        print("(no skills)")
        return
    for skill in skills:
        tags = []
        if skill.is_built_in:
            tags.append("built-in")
        if skill.is_global:
            tags.append("global")
        suffix = f" ({', '.join(tags)})" if tags else ""
        print(f"{skill.name}{suffix}: {skill.description}")


async def _run(cmd: str, arg: str | None) -> int:
    config = load_config()
    _setup_logging(config.log_level)
    app = VaultCmd(config)

    if cmd == "commands":
        await _list_commands(app)
    elif cmd == "show" and arg:
        return await _show_command(app, arg)
    elif cmd == "delete" and arg:
        return await _delete_command(app, arg)
    elif cmd == "skills":
        await _list_skills(app)
    elif cmd == "install-skill" and arg:
        name = await app.skills.install_from_url(arg)
        print(f'Skill "{name}" installed')
    elif cmd == "remove-skill" and arg:
        await app.skills.remove(arg)
        print(f'Skill "{arg}" removed')
    elif cmd == "install-bundled":
        names = await app.skills.install_bundled()
        print(f"Installed: {', '.join(names)}")
    elif cmd == "uninstall-bundled":
        await app.skills.uninstall_bundled()
        print("Bundled skills removed")
    else:
        print(USAGE)
        return 1
    return 0


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "commands"
    arg = sys.argv[2] if len(sys.argv) > 2 else None

    try:
        code = asyncio.run(_run(cmd, arg))
    except VaultCmdError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
