from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from .types import MovableFeast


class FeastTable:
    """
    Ordered, read-only table of movable feasts with a derived name -> offset map.
    Built once; there is no mutation path after construction.
    """
    __slots__ = ("_entries", "_offsets")

    def __init__(self, entries: Iterable[MovableFeast]):
        entries = tuple(entries)
        offsets = {}
        for e in entries:
            if e.name in offsets:
                raise ValueError(f"Duplicate feast name '{e.name}' in table")
            offsets[e.name] = e.offset
        self._entries: Tuple[MovableFeast, ...] = entries
        self._offsets: Mapping[str, int] = MappingProxyType(offsets)

    @property
    def entries(self) -> Tuple[MovableFeast, ...]:
        return self._entries

    def offset(self, name: str) -> Optional[int]:
        return self._offsets.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(e.name for e in self._entries)

    def __iter__(self) -> Iterator[MovableFeast]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._offsets
