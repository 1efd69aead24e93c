"""Slash command storage.

Layout:
    ~/.claude/commands/            # Global scope (read-only from here)
    └── review.md
    <vault>/.claude/commands/      # Vault scope, wins on name clashes
    ├── review.md
    └── code/
        └── refactor.md            # name "code/refactor", id "cmd-code--refactor"

Each file is Markdown with a YAML frontmatter header; see `parser`.
"""
