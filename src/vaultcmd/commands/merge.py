"""Name-based merge of global and vault-scoped entries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar


class Named(Protocol):
    @property
    def name(self) -> str: ...


T = TypeVar("T", bound=Named)


def merge_by_name(global_items: Sequence[T], local_items: Sequence[T]) -> list[T]:
    """Vault entries replace global entries with the same name.

    Result: non-overridden global entries in their order, then all local
    entries in theirs.
    """
    local_names = {item.name for item in local_items}
    return [item for item in global_items if item.name not in local_names] + list(local_items)
