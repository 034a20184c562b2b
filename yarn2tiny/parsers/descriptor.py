"""
JVM Descriptor Grammar Parser
==============================

Recursive-descent scanner for class-file type descriptors and method
descriptors (JVMS section 4.3)::

    FieldType   ::= BaseType | ObjectType | ArrayType
    BaseType    ::= 'Z'|'C'|'B'|'S'|'I'|'F'|'J'|'D'|'V'
    ObjectType  ::= 'L' ClassName ';'
    ArrayType   ::= '[' FieldType
    MethodType  ::= '(' ParamType* ')' ReturnType

The scanner makes a single forward pass and emits a flat stream of
:class:`Token` values drawn from a closed set of kinds.  Consumers reduce
that stream: :func:`parse_method_type` builds a :class:`MethodType`,
:func:`is_valid_method_type` only checks that the stream completes, and
:func:`class_names` collects the embedded class references.

Generic signatures (``<...>``, ``T...;``) are not part of the grammar.

References:
    - Oracle. (2023). The Java Virtual Machine Specification, SE 21.
      Section 4.3: Descriptors.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Generator, Iterable, Iterator

from yarn2tiny.core.errors import DescriptorError


# ---------------------------------------------------------------------------
# Grammar constants
# ---------------------------------------------------------------------------

BASE_TYPES: frozenset[str] = frozenset("ZCBSIFJDV")
VOID: str = "V"
ARRAY_MARKER: str = "["
OBJECT_MARKER: str = "L"
OBJECT_TERMINATOR: str = ";"


# ---------------------------------------------------------------------------
# Token stream
# ---------------------------------------------------------------------------

class TokenKind(str, enum.Enum):
    """Kinds of token produced by the descriptor scanner."""
    PARAMETERS = "parameters"
    RETURN = "return"
    ARRAY = "array"
    BASE_TYPE = "base_type"
    CLASS_TYPE = "class_type"
    END = "end"


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanner event.

    Attributes:
        kind: What was recognised.
        position: Offset of the recognised element in the scanned string.
        value: Base-type letter for ``BASE_TYPE``, class name for
            ``CLASS_TYPE``, empty otherwise.
    """
    kind: TokenKind
    position: int
    value: str = ""


# ---------------------------------------------------------------------------
# Parsed structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FieldType:
    """One parsed field type, including its array dimension."""
    dimensions: int
    base: str | None = None
    class_name: str | None = None

    @property
    def is_object(self) -> bool:
        """``True`` for object types and arrays of object types."""
        return self.class_name is not None

    @property
    def descriptor(self) -> str:
        """Self-contained descriptor string, array prefix included."""
        prefix = ARRAY_MARKER * self.dimensions
        if self.class_name is not None:
            return f"{prefix}{OBJECT_MARKER}{self.class_name}{OBJECT_TERMINATOR}"
        return f"{prefix}{self.base}"

    def with_class_name(self, class_name: str) -> FieldType:
        """Return a copy referencing *class_name*, keeping the dimension."""
        return replace(self, class_name=class_name)


@dataclass(frozen=True, slots=True)
class MethodType:
    """A parsed method descriptor: ordered parameters and one return type."""
    parameters: tuple[FieldType, ...]
    return_type: FieldType

    @property
    def parameter_descriptors(self) -> tuple[str, ...]:
        return tuple(param.descriptor for param in self.parameters)

    @property
    def return_descriptor(self) -> str:
        return self.return_type.descriptor

    @property
    def descriptor(self) -> str:
        """Reassembled ``(params)return`` descriptor."""
        return f"({''.join(self.parameter_descriptors)}){self.return_descriptor}"


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

def _scan_field(
    text: str,
    pos: int,
    *,
    allow_void: bool,
) -> Generator[Token, None, int]:
    """Scan one ``FieldType`` starting at *pos*; return the next offset."""
    start = pos
    while True:
        if pos >= len(text):
            raise DescriptorError(text, pos, "unexpected end of descriptor")

        char = text[pos]
        if char == ARRAY_MARKER:
            yield Token(TokenKind.ARRAY, pos)
            pos += 1
            continue

        if char in BASE_TYPES:
            if char == VOID and (not allow_void or pos > start):
                raise DescriptorError(
                    text, pos, "void is only valid as a return type"
                )
            yield Token(TokenKind.BASE_TYPE, pos, char)
            return pos + 1

        if char == OBJECT_MARKER:
            end = text.find(OBJECT_TERMINATOR, pos + 1)
            if end == -1:
                raise DescriptorError(text, len(text), "unterminated class name")
            if end == pos + 1:
                raise DescriptorError(text, pos, "empty class name")
            yield Token(TokenKind.CLASS_TYPE, pos, text[pos + 1:end])
            return end + 1

        raise DescriptorError(text, pos, f"unexpected character {char!r}")


def scan_method_type(signature: str) -> Iterator[Token]:
    """Scan a method descriptor into a token stream.

    The stream always has the shape ``PARAMETERS (param tokens)* RETURN
    (return tokens) END``.  Errors surface while the stream is consumed.

    Raises:
        DescriptorError: If the signature does not follow the grammar.
    """
    if not signature.startswith("("):
        raise DescriptorError(signature, 0, "expected '('")
    yield Token(TokenKind.PARAMETERS, 0)

    pos = 1
    while True:
        if pos >= len(signature):
            raise DescriptorError(signature, pos, "missing ')'")
        if signature[pos] == ")":
            break
        pos = yield from _scan_field(signature, pos, allow_void=False)

    yield Token(TokenKind.RETURN, pos)
    pos = yield from _scan_field(signature, pos + 1, allow_void=True)

    if pos != len(signature):
        raise DescriptorError(
            signature, pos, "trailing characters after return type"
        )
    yield Token(TokenKind.END, pos)


def scan_field_type(descriptor: str) -> Iterator[Token]:
    """Scan a single field descriptor into a token stream ending in ``END``.

    Raises:
        DescriptorError: If the descriptor does not follow the grammar.
    """
    pos = yield from _scan_field(descriptor, 0, allow_void=False)
    if pos != len(descriptor):
        raise DescriptorError(
            descriptor, pos, "trailing characters after field type"
        )
    yield Token(TokenKind.END, pos)


# ---------------------------------------------------------------------------
# Consumers
# ---------------------------------------------------------------------------

def _reduce(tokens: Iterable[Token]) -> tuple[list[FieldType], list[FieldType]]:
    """Fold a token stream into (parameter types, return types)."""
    parameters: list[FieldType] = []
    returns: list[FieldType] = []
    target = parameters
    dimensions = 0

    for token in tokens:
        kind = token.kind
        if kind is TokenKind.PARAMETERS:
            target = parameters
        elif kind is TokenKind.RETURN:
            target = returns
        elif kind is TokenKind.ARRAY:
            dimensions += 1
        elif kind is TokenKind.BASE_TYPE:
            target.append(FieldType(dimensions, base=token.value))
            dimensions = 0
        elif kind is TokenKind.CLASS_TYPE:
            target.append(FieldType(dimensions, class_name=token.value))
            dimensions = 0
        elif kind is TokenKind.END:
            break
        else:
            raise AssertionError(f"unhandled token kind: {kind}")

    return parameters, returns


def parse_method_type(signature: str) -> MethodType:
    """Parse a method descriptor such as ``(Lfoo/Bar;I)[J``.

    Raises:
        DescriptorError: If the signature cannot be fully consumed.
    """
    parameters, returns = _reduce(scan_method_type(signature))
    return MethodType(tuple(parameters), returns[0])


def parse_field_type(descriptor: str) -> FieldType:
    """Parse a single field descriptor such as ``[[Lfoo/Bar;``.

    Raises:
        DescriptorError: If the descriptor cannot be fully consumed.
    """
    parameters, _ = _reduce(scan_field_type(descriptor))
    return parameters[0]


def is_valid_method_type(signature: str) -> bool:
    """Return ``True`` when *signature* is a well-formed method descriptor."""
    try:
        for _ in scan_method_type(signature):
            pass
    except DescriptorError:
        return False
    return True


def class_names(signature: str) -> list[str]:
    """List every class referenced by a method descriptor, in order."""
    return [
        token.value
        for token in scan_method_type(signature)
        if token.kind is TokenKind.CLASS_TYPE
    ]
