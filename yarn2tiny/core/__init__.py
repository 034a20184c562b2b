"""
Yarn2Tiny Core Module
======================

Data models, error hierarchy, and the class symbol table.  The engine and
remapper live in :mod:`yarn2tiny.core.engine` and
:mod:`yarn2tiny.core.remapper`.
"""

from yarn2tiny.core.errors import (
    ConversionError,
    DescriptorError,
    InputPathError,
    OutputPathError,
    UnsupportedVersionError,
)
from yarn2tiny.core.models import (
    ClassEntry,
    ConversionReport,
    MappingSet,
    MemberEntry,
    MemberKind,
    RowWarning,
)
from yarn2tiny.core.symbol_table import SymbolTable

__all__ = [
    "ClassEntry",
    "ConversionError",
    "ConversionReport",
    "DescriptorError",
    "InputPathError",
    "MappingSet",
    "MemberEntry",
    "MemberKind",
    "OutputPathError",
    "RowWarning",
    "SymbolTable",
    "UnsupportedVersionError",
]
