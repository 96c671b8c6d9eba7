"""Domain models (Pydantic v2).

- `FieldDescriptor`, `TypeDescriptor` and `DocumentModel` describe what was
  recovered from one declaration document.
- `Documentation` and its sections are the structured artifact produced by the
  synthesizer; renderers (Markdown, HTML) consume it.

These models describe *what* the information is, not *how* it is obtained or
written.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.language import Language


class TypeCategory(str, Enum):
    """Coarse category of a raw type expression."""

    TEXT = "text"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    TEMPORAL = "temporal"
    STRUCTURED = "structured"


class BodyScanMode(str, Enum):
    """How the extractor decides where a declaration body ends."""

    NEAREST = "nearest"
    BALANCED = "balanced"


class ReferenceMatch(str, Enum):
    """How the dependency graph detects a reference to another type."""

    SUBSTRING = "substring"
    WORD = "word"


class FieldDescriptor(BaseModel):
    """One declared property of a type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Property identifier as written in the declaration.",
    )
    optional: bool = Field(
        default=False,
        description="True when the property carries the `?` marker.",
    )
    type_expression: str = Field(
        ...,
        min_length=1,
        description="Raw type expression (whitespace-normalized, otherwise unparsed).",
    )


class TypeDescriptor(BaseModel):
    """A declared type and its fields in declaration order.

    Declarations without recognized fields are kept with an empty `fields`
    tuple so the documentation can say so.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Declared type name.")
    fields: tuple[FieldDescriptor, ...] = Field(
        default=(),
        description="Fields in the order they appear in the body.",
    )


class DocumentModel(BaseModel):
    """All types recovered from one document, keyed by name in appearance order."""

    types: dict[str, TypeDescriptor] = Field(default_factory=dict)

    @property
    def type_names(self) -> list[str]:
        return list(self.types)

    @property
    def is_empty(self) -> bool:
        return not self.types

    def __len__(self) -> int:
        return len(self.types)


class PropertyRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type_expression: str
    required: bool
    description: str = ""


class PropertyTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    type_name: str
    rows: tuple[PropertyRow, ...] = ()


class ValidationRule(BaseModel):
    """Natural-language validation statement for a single field."""

    model_config = ConfigDict(frozen=True)

    field_name: str
    required: bool
    category: TypeCategory


class TypeSection(BaseModel):
    """Everything the documentation says about one type."""

    type_name: str
    table: PropertyTable
    example: str | None = Field(
        default=None,
        description="Example object literal source; None when examples are disabled.",
    )
    rules: list[ValidationRule] | None = Field(
        default=None,
        description="Validation rules; None when rule generation is disabled.",
    )


class GraphEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    target: str


class TypeGraph(BaseModel):
    nodes: list[str] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)


class Documentation(BaseModel):
    """Structured documentation artifact for one document."""

    name: str = Field(..., description="Document name (usually the source file stem).")
    language: Language = Field(default=Language.ENGLISH)
    sections: list[TypeSection] = Field(default_factory=list)
    graph: TypeGraph | None = Field(
        default=None,
        description="Dependency graph; None when disabled or when there are no types.",
    )


class DocumentationOptions(BaseModel):
    """Switches consumed by the synthesizer."""

    model_config = ConfigDict(frozen=True)

    examples: bool = True
    type_graph: bool = True
    validation_rules: bool = True
    language: Language = Language.ENGLISH
    body_scan: BodyScanMode = BodyScanMode.NEAREST
    reference_match: ReferenceMatch = ReferenceMatch.SUBSTRING


class DocumentationOutcome(BaseModel):
    """Result of assembling the documentation for one document.

    `error` is set (and `documentation`/`markdown` left empty) only when the
    artifact could not be assembled.
    """

    name: str
    model: DocumentModel | None = None
    documentation: Documentation | None = None
    markdown: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
