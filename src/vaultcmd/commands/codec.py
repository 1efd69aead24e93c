"""Reversible path ↔ identifier encoding.

Grammar of the escaped body (after the prefix)::

    body  := token*
    token := "--"        # path separator "/"
           | "-_"        # literal "-"
           | <any char except "-">

Encoding escapes dashes first, then separators:

    a/b.md   -> cmd-a--b
    a-b.md   -> cmd-a-_b
    a--b.md  -> cmd-a-_-_b
    a/b-c.md -> cmd-a--b-_c

Swapping the two steps would turn "a-/b" and "a/-b" style names into
ambiguous sequences, so the order must not change.
"""

from __future__ import annotations

DEFAULT_PREFIX = "cmd-"
DEFAULT_EXTENSION = ".md"


class PathIdentityCodec:
    """Encode relative file paths into flat ids and back."""

    def __init__(self, prefix: str = DEFAULT_PREFIX, extension: str = DEFAULT_EXTENSION) -> None:
        self.prefix = prefix
        self.extension = extension

    def strip_extension(self, relative_path: str) -> str:
        if self.extension and relative_path.endswith(self.extension):
            return relative_path[: -len(self.extension)]
        return relative_path

    def name_from_path(self, relative_path: str) -> str:
        """Display name: separators kept, extension dropped, nothing escaped."""
        return self.strip_extension(relative_path)

    def encode(self, relative_path: str) -> str:
        stem = self.strip_extension(relative_path)
        escaped = stem.replace("-", "-_").replace("/", "--")
        return f"{self.prefix}{escaped}"

    def decode(self, identifier: str) -> str:
        """Recover the relative path (without extension) from an id."""
        if not identifier.startswith(self.prefix):
            raise ValueError(f"Identifier {identifier!r} lacks prefix {self.prefix!r}")
        body = identifier[len(self.prefix) :]

        out: list[str] = []
        i = 0
        while i < len(body):
            ch = body[i]
            if ch != "-":
                out.append(ch)
                i += 1
                continue
            nxt = body[i + 1] if i + 1 < len(body) else ""
            if nxt == "-":
                out.append("/")
            elif nxt == "_":
                out.append("-")
            else:
                raise ValueError(f"Malformed escape at offset {i} in {identifier!r}")
            i += 2
        return "".join(out)

    def is_valid(self, identifier: str) -> bool:
        try:
            self.decode(identifier)
        except ValueError:
            return False
        return True
