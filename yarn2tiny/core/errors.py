"""
Conversion Errors
==================

Exception hierarchy for fatal conversion failures.  Anything raised from
here aborts the whole run; row-scoped problems are reported as
:class:`~yarn2tiny.core.models.RowWarning` values instead.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every fatal yarn -> tiny conversion failure."""

    pass


class InputPathError(ConversionError):
    """The input mappings path is missing or is a directory."""

    pass


class OutputPathError(ConversionError):
    """The output destination cannot be written."""

    pass


class UnsupportedVersionError(ConversionError):
    """The input header does not carry the supported version tag."""

    def __init__(self, header: str, expected: str) -> None:
        self.header = header
        self.expected = expected
        shown = header if header else "<empty file>"
        super().__init__(
            f"Only {expected} mappings are supported, got header {shown!r}"
        )


class DescriptorError(ConversionError):
    """A type descriptor or method signature does not follow the grammar.

    Attributes:
        descriptor: The full descriptor string being scanned.
        position:   Offset at which scanning failed.
        reason:     Short description of what was expected.
    """

    def __init__(self, descriptor: str, position: int, reason: str) -> None:
        self.descriptor = descriptor
        self.position = position
        self.reason = reason
        super().__init__(
            f"Cannot map descriptor {descriptor!r}: {reason} at offset {position}"
        )
