"""
Yarn2Tiny Parsers
==================

Input parsing for the converter: the JVM descriptor grammar and the
yarn v1 row reader.
"""

from yarn2tiny.parsers.descriptor import (
    FieldType,
    MethodType,
    Token,
    TokenKind,
    parse_field_type,
    parse_method_type,
)
from yarn2tiny.parsers.yarn_parser import YarnV1Parser

__all__ = [
    "FieldType",
    "MethodType",
    "Token",
    "TokenKind",
    "YarnV1Parser",
    "parse_field_type",
    "parse_method_type",
]
