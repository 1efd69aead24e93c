"""Claude skills — `<name>/SKILL.md` folders under `.claude/skills/`."""
