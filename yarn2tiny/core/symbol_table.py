"""
Class Symbol Table
===================

Ordered collection of class entries with lookup by obfuscated name.

Mapping files may contain more than one row for the same obfuscated
name.  Lookups always resolve to the first such row: the index is built
in input order and never overwrites an existing key.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from yarn2tiny.core.models import ClassEntry


class SymbolTable:
    """Class entries in input order, indexed by obfuscated name.

    Usage::

        table = SymbolTable.from_entries(mappings.classes)
        entry = table.lookup("abc")
        name = table.resolve("abc")   # intermediate name, or "abc"
    """

    def __init__(self) -> None:
        self._entries: list[ClassEntry] = []
        self._index: dict[str, ClassEntry] = {}
        self._duplicates: list[str] = []

    @classmethod
    def from_entries(cls, entries: Iterable[ClassEntry]) -> SymbolTable:
        table = cls()
        for entry in entries:
            table.insert(entry)
        return table

    def insert(self, entry: ClassEntry) -> None:
        """Append *entry*; an existing entry with the same key keeps priority."""
        self._entries.append(entry)
        existing = self._index.setdefault(entry.obfuscated, entry)
        if existing is not entry and entry.obfuscated not in self._duplicates:
            self._duplicates.append(entry.obfuscated)

    def lookup(self, obfuscated_name: str) -> Optional[ClassEntry]:
        """Return the first entry whose obfuscated name matches, else ``None``."""
        return self._index.get(obfuscated_name)

    def resolve(self, obfuscated_name: str) -> str:
        """Return the intermediate name for *obfuscated_name*, or the name itself."""
        entry = self._index.get(obfuscated_name)
        return entry.intermediate if entry is not None else obfuscated_name

    @property
    def duplicates(self) -> list[str]:
        """Obfuscated names inserted more than once, in first-repeat order."""
        return list(self._duplicates)

    def __contains__(self, obfuscated_name: object) -> bool:
        return obfuscated_name in self._index

    def __iter__(self) -> Iterator[ClassEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
