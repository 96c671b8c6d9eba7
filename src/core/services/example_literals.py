"""Illustrative object literals.

The literal only mirrors the shape of the type: keys in declaration order,
values picked from the catalog sample of each field's category.
"""

from __future__ import annotations

from core.domain.models import TypeDescriptor
from core.domain.vocabulary import TypeCatalog


def build_example_literal(descriptor: TypeDescriptor, catalog: TypeCatalog) -> str:
    lines = [f"const example{descriptor.name} = {{"]
    for field in descriptor.fields:
        lines.append(f"  {field.name}: {catalog.sample_for(field.type_expression)},")
    lines.append("};")
    return "\n".join(lines)
