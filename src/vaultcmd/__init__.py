"""vaultcmd — slash commands and skills from global and vault .claude folders.

Layout:
    ~/.claude/commands/, ~/.claude/skills/        # Global scope
    <vault>/.claude/commands/, .claude/skills/    # Vault scope (wins on name clashes)
"""
