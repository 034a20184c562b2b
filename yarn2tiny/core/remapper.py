"""
Descriptor Remapper
====================

Rewrites the class references embedded in field descriptors and method
descriptors so that they name intermediate classes instead of obfuscated
ones.

Only object types and arrays of object types are touched; primitive
descriptors pass through without a lookup.  A class name with no row in
the symbol table is kept as-is.  The array dimension is always preserved.

Usage::

    table = SymbolTable.from_entries(classes)
    remap_field_type("[[Lfoo/Bar;", table)          # "[[La/B;"
    remap_method_type("(Lfoo/Bar;I)Lfoo/Baz;", table)  # "(La/B;I)La/C;"
"""

from __future__ import annotations

from typing import Callable

from yarn2tiny.core.errors import DescriptorError
from yarn2tiny.core.symbol_table import SymbolTable
from yarn2tiny.parsers.descriptor import (
    ARRAY_MARKER,
    OBJECT_MARKER,
    OBJECT_TERMINATOR,
    parse_method_type,
)


def is_object_descriptor(descriptor: str) -> bool:
    """``True`` for ``L...;`` and ``[...[L...;`` descriptors."""
    return descriptor.lstrip(ARRAY_MARKER).startswith(OBJECT_MARKER)


def _remap_field(descriptor: str, resolve: Callable[[str], str]) -> str:
    if not is_object_descriptor(descriptor):
        return descriptor

    element = descriptor.lstrip(ARRAY_MARKER)
    prefix = descriptor[: len(descriptor) - len(element)]

    if not element.endswith(OBJECT_TERMINATOR):
        raise DescriptorError(descriptor, len(descriptor), "unterminated class name")
    class_name = element[1:-1]
    if not class_name:
        raise DescriptorError(descriptor, len(prefix), "empty class name")
    if OBJECT_TERMINATOR in class_name:
        raise DescriptorError(
            descriptor,
            len(prefix) + 1 + class_name.index(OBJECT_TERMINATOR),
            "trailing characters after field type",
        )

    return f"{prefix}{OBJECT_MARKER}{resolve(class_name)}{OBJECT_TERMINATOR}"


def _remap_method(signature: str, resolve: Callable[[str], str]) -> str:
    method = parse_method_type(signature)
    params = "".join(
        _remap_field(param, resolve) for param in method.parameter_descriptors
    )
    return f"({params}){_remap_field(method.return_descriptor, resolve)}"


def remap_field_type(descriptor: str, table: SymbolTable) -> str:
    """Rewrite the class reference of a single field descriptor.

    Raises:
        DescriptorError: If an object descriptor is malformed.
    """
    return _remap_field(descriptor, table.resolve)


def remap_method_type(signature: str, table: SymbolTable) -> str:
    """Rewrite every class reference of a method descriptor.

    Raises:
        DescriptorError: If the signature cannot be parsed.
    """
    return _remap_method(signature, table.resolve)


class DescriptorRemapper:
    """Remapper bound to one symbol table that remembers lookup misses."""

    def __init__(self, table: SymbolTable) -> None:
        self._table = table
        self._unresolved: dict[str, None] = {}

    def _resolve(self, class_name: str) -> str:
        entry = self._table.lookup(class_name)
        if entry is None:
            self._unresolved.setdefault(class_name, None)
            return class_name
        return entry.intermediate

    def field_type(self, descriptor: str) -> str:
        return _remap_field(descriptor, self._resolve)

    def method_type(self, signature: str) -> str:
        return _remap_method(signature, self._resolve)

    @property
    def unresolved(self) -> list[str]:
        """Class names that had no table entry, in first-seen order."""
        return list(self._unresolved)
