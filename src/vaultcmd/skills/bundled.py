"""Skills shipped with vaultcmd and installed into the vault on request."""

from __future__ import annotations

OBSIDIAN_MARKDOWN_SKILL = """\
---
name: obsidian-markdown
description: Create and edit Obsidian Flavored Markdown with wikilinks, embeds, callouts, properties, and other Obsidian-specific syntax. Use when working with .md files in Obsidian.
---

# Obsidian Flavored Markdown Skill

Obsidian combines CommonMark, GitHub Flavored Markdown, LaTeX math and its own
extensions.

## Internal Links (Wikilinks)

```markdown
[[Note Name]]
[[Note Name|Display Text]]
[[Note Name#Heading]]
[[Note Name#^block-id]]
```

## Embeds

```markdown
![[Note Name]]
![[image.png|300]]
![[document.pdf#page=3]]
```

## Callouts

```markdown
> [!note]
> This is a note callout.

> [!warning]- Collapsed by default
> This content is hidden until expanded.
```

Types: note, abstract, info, todo, tip, success, question, warning, failure,
danger, bug, example, quote.

## Properties (Frontmatter)

```yaml
---
title: My Note Title
tags:
  - project
aliases:
  - My Note
---
```

## Tags and Comments

```markdown
#tag #nested/tag
This is visible %%but this is hidden%% text.
```

## References

- https://help.obsidian.md/obsidian-flavored-markdown
- https://help.obsidian.md/callouts
"""

JSON_CANVAS_SKILL = """\
---
name: json-canvas
description: Create and edit JSON Canvas files (.canvas) for visual note-taking and mind mapping in Obsidian.
---

# JSON Canvas Skill

A canvas file is a JSON object with `nodes` and `edges` arrays.

## Node Types

Every node has `id`, `type`, `x`, `y`, `width`, `height`.

- `text`: `"text": "Markdown content"`
- `file`: `"file": "path/to/note.md"`
- `link`: `"url": "https://example.com"`
- `group`: `"label": "Group Label"`

Optional `color`: `"1"`-`"6"` (preset) or a hex code.

## Edges

```json
{
  "id": "e1",
  "fromNode": "main",
  "toNode": "sub1",
  "fromSide": "right",
  "toSide": "left",
  "label": "Connection label"
}
```

Sides: `top`, `right`, `bottom`, `left`.

## References

- https://jsoncanvas.org/
"""

BUNDLED_SKILLS: dict[str, str] = {
    "obsidian-markdown": OBSIDIAN_MARKDOWN_SKILL,
    "json-canvas": JSON_CANVAS_SKILL,
}

BUILT_IN_SKILLS = tuple(BUNDLED_SKILLS)
