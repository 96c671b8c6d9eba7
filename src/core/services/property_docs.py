"""Property tables and validation rules for a single type."""

from __future__ import annotations

from core.domain.models import (
    PropertyRow,
    PropertyTable,
    TypeDescriptor,
    ValidationRule,
)
from core.domain.vocabulary import Phrasebook, TypeCatalog


def build_property_table(descriptor: TypeDescriptor) -> PropertyTable:
    rows = tuple(
        PropertyRow(
            name=field.name,
            type_expression=field.type_expression,
            required=not field.optional,
        )
        for field in descriptor.fields
    )
    return PropertyTable(type_name=descriptor.name, rows=rows)


def render_property_table(table: PropertyTable, phrases: Phrasebook) -> list[str]:
    """Markdown lines of the table, followed by a blank chunk.

    A type without fields keeps its header and states that nothing was found.
    """

    lines = [phrases.table_header, phrases.table_separator]
    for row in table.rows:
        required = phrases.yes if row.required else phrases.no
        type_cell = row.type_expression.replace("|", "\\|")
        description = f"{row.description} " if row.description else ""
        lines.append(f"| {row.name} | `{type_cell}` | {required} | {description}|")
    if not table.rows:
        lines.append(phrases.no_fields)
    lines.append("\n")
    return lines


def build_validation_rules(descriptor: TypeDescriptor, catalog: TypeCatalog) -> list[ValidationRule]:
    return [
        ValidationRule(
            field_name=field.name,
            required=not field.optional,
            category=catalog.classify(field.type_expression),
        )
        for field in descriptor.fields
    ]


def describe_rule(rule: ValidationRule, phrases: Phrasebook) -> str:
    presence = phrases.required if rule.required else phrases.optional
    return f"{presence}, {phrases.category_phrase(rule.category)}"


def render_validation_rules(type_name: str, rules: list[ValidationRule], phrases: Phrasebook) -> list[str]:
    lines = [f"{phrases.rules_heading_for(type_name)}\n"]
    for rule in rules:
        lines.append(f"- `{rule.field_name}`: {describe_rule(rule, phrases)}")
    lines.append("")
    return lines
