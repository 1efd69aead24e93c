"""Per-conversation attachment state.

Tracks which files are attached to the current conversation, which of those
are pinned (explicitly attached via command or @-mention, so automatic
replacement must leave them alone), and a display-name → path alias map used
to rewrite @-mentions in outgoing text.
"""

from __future__ import annotations

from collections.abc import Iterable


class SessionAttachmentState:
    """Attached/pinned references, alias map and session lifecycle flags."""

    def __init__(self) -> None:
        self._attached: set[str] = set()
        # Pin intent. Survives clear_attachments() and re-applies when the same
        # reference is attached again; only the part intersecting _attached is
        # ever reported as pinned.
        self._pin_intent: set[str] = set()
        self._aliases: dict[str, str] = {}
        self._session_started = False
        self._current_note_sent = False
        self._mentioned_servers: set[str] = set()

    # ── Queries ───────────────────────────────────────────────

    @property
    def attached(self) -> set[str]:
        return set(self._attached)

    @property
    def pinned(self) -> set[str]:
        return self._pin_intent & self._attached

    @property
    def alias_map(self) -> dict[str, str]:
        return dict(self._aliases)

    def is_attached(self, ref: str) -> bool:
        return ref in self._attached

    def is_pinned(self, ref: str) -> bool:
        return ref in self._pin_intent and ref in self._attached

    def has_pinned(self) -> bool:
        return bool(self.pinned)

    # ── Session lifecycle ─────────────────────────────────────

    @property
    def session_started(self) -> bool:
        return self._session_started

    def start_session(self) -> None:
        self._session_started = True

    @property
    def current_note_sent(self) -> bool:
        return self._current_note_sent

    def mark_current_note_sent(self) -> None:
        self._current_note_sent = True

    def _clear_all(self) -> None:
        self._attached.clear()
        self._pin_intent.clear()
        self._aliases.clear()
        self._mentioned_servers.clear()

    def reset_for_new_conversation(self) -> None:
        self._clear_all()
        self._session_started = False
        self._current_note_sent = False

    def reset_for_loaded_conversation(self, has_messages: bool) -> None:
        """Resume a stored conversation: a non-empty history counts as started."""
        self._clear_all()
        self._session_started = has_messages
        self._current_note_sent = has_messages

    # ── Mutations ─────────────────────────────────────────────

    def set_attached(self, refs: Iterable[str]) -> None:
        self._attached = set(refs)

    def attach(self, ref: str) -> None:
        self._attached.add(ref)

    def pin(self, ref: str) -> None:
        self._attached.add(ref)
        self._pin_intent.add(ref)

    def unpin(self, ref: str) -> None:
        """Keep the reference attached but allow automatic replacement."""
        self._pin_intent.discard(ref)

    def attach_aliased(self, display_name: str, canonical_path: str) -> None:
        """Attach a context file under a display name (e.g. "@folder/file.ts").

        Aliased references are always pinned.
        """
        self.pin(canonical_path)
        self._aliases[display_name] = canonical_path

    def detach(self, ref: str) -> None:
        self._attached.discard(ref)
        self._pin_intent.discard(ref)

    def clear_attachments(self) -> None:
        """Drop every attachment and alias. Pin intent is kept until a new conversation."""
        self._attached.clear()
        self._aliases.clear()

    def clear_non_pinned_attachments(self) -> None:
        """Used when opening new files: everything not pinned goes."""
        self._attached &= self._pin_intent

    # ── Text rewriting ────────────────────────────────────────

    def transform_mentions(self, text: str) -> str:
        """Replace alias display names in text with their canonical paths.

        Names are literal strings. Longer names are substituted first (ties
        keep insertion order) so "@a" cannot eat the front of "@ab"; each
        substitution runs on the output of the previous one.
        """
        ordered = sorted(self._aliases.items(), key=lambda item: len(item[0]), reverse=True)
        result = text
        for display_name, canonical_path in ordered:
            if display_name:
                result = result.replace(display_name, canonical_path)
        return result

    # ── Mentioned MCP servers ─────────────────────────────────

    @property
    def mentioned_servers(self) -> set[str]:
        return set(self._mentioned_servers)

    def set_mentioned_servers(self, names: Iterable[str]) -> bool:
        """Replace the tracked set; returns whether it changed."""
        new = set(names)
        changed = new != self._mentioned_servers
        if changed:
            self._mentioned_servers = new
        return changed

    def add_mentioned_server(self, name: str) -> None:
        self._mentioned_servers.add(name)

    def clear_mentioned_servers(self) -> None:
        self._mentioned_servers.clear()
