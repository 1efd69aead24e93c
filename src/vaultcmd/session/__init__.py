"""In-memory conversation state (attachments, pins, @-mention aliases)."""
