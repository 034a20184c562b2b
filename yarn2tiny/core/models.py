"""
Yarn2Tiny Data Models
======================

Pydantic models for the in-memory mapping set and the conversion report.

A mapping set holds three kinds of rows.  Class rows link the obfuscated,
intermediate, and readable names of a class and double as symbol-table
keys.  Field and method rows additionally carry an owner class and a type
descriptor; the descriptor is the only value rewritten after ingestion.

References:
    - FabricMC. Tiny v1 mapping format.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class MemberKind(str, enum.Enum):
    """Row tags of the v1 mapping formats."""
    CLASS = "CLASS"
    FIELD = "FIELD"
    METHOD = "METHOD"


# ---------------------------------------------------------------------------
# Mapping rows
# ---------------------------------------------------------------------------

class ClassEntry(BaseModel):
    """A class row: three aliases for the same class.

    Attributes:
        obfuscated: Name as it appears in the shipped bytecode.
        intermediate: Stable intermediate name.
        readable: Human-readable name.
    """
    model_config = ConfigDict(frozen=True)

    obfuscated: str
    intermediate: str
    readable: str


class MemberEntry(BaseModel):
    """A field or method row.

    Attributes:
        kind: ``FIELD`` or ``METHOD``.
        owner: Owning class; obfuscated on ingestion, intermediate once
            resolved against the class table.
        obfuscated: Obfuscated member name.
        intermediate: Intermediate member name.
        readable: Readable member name.
        type_descriptor: Field descriptor or method descriptor.  Starts as
            read from input and is replaced by its remapped form.
        line_number: 1-based source line, for diagnostics.
    """
    model_config = ConfigDict(validate_assignment=True)

    kind: MemberKind
    owner: str
    obfuscated: str
    intermediate: str
    readable: str
    type_descriptor: str
    line_number: int = 0


class RowWarning(BaseModel):
    """A recoverable, row-scoped problem; the row was dropped."""
    line_number: int
    message: str
    line: str = ""


class MappingSet(BaseModel):
    """Everything read from one mappings file, in input order."""
    version: str = "v1"
    namespaces: list[str] = Field(default_factory=list)
    classes: list[ClassEntry] = Field(default_factory=list)
    fields: list[MemberEntry] = Field(default_factory=list)
    methods: list[MemberEntry] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.classes) + len(self.fields) + len(self.methods)

    @property
    def members(self) -> list[MemberEntry]:
        return [*self.fields, *self.methods]


# ---------------------------------------------------------------------------
# Conversion report
# ---------------------------------------------------------------------------

class ConversionReport(BaseModel):
    """Outcome of one conversion run.

    Attributes:
        input_path: Source yarn mappings file.
        output_path: Destination tiny mappings file.
        started_at: UTC timestamp when the run began.
        finished_at: UTC timestamp when the output was written.
        class_count: Class rows written.
        field_count: Field rows written.
        method_count: Method rows written.
        warnings: Rows dropped during ingestion.
        unresolved_classes: Class names referenced by descriptors that had
            no class row; they were kept unchanged.
        duplicate_classes: Obfuscated class names with more than one row;
            the first row wins.
    """
    input_path: str
    output_path: str
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None
    class_count: int = 0
    field_count: int = 0
    method_count: int = 0
    warnings: list[RowWarning] = Field(default_factory=list)
    unresolved_classes: list[str] = Field(default_factory=list)
    duplicate_classes: list[str] = Field(default_factory=list)

    @property
    def rows_converted(self) -> int:
        return self.class_count + self.field_count + self.method_count

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if the run has not finished."""
        if self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()
