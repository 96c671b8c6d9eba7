"""Documentation synthesizer.

Fans a `DocumentModel` out to the four generators (property tables, example
literals, validation rules, dependency graph) and assembles a structured
`Documentation`. `render_markdown` turns it into the single text artifact:

    title
    per type: property table, [example block], [validation-rule block]
    [graph block]

Everything here is pure and deterministic: no clock, no randomness, no I/O.
"""

from __future__ import annotations

import structlog

from core.domain.models import (
    DocumentModel,
    Documentation,
    DocumentationOptions,
    DocumentationOutcome,
    TypeSection,
)
from core.domain.vocabulary import Phrasebook, TypeCatalog, phrasebook_for
from core.services.declaration_extractor import extract_declarations
from core.services.example_literals import build_example_literal
from core.services.property_docs import (
    build_property_table,
    build_validation_rules,
    render_property_table,
    render_validation_rules,
)
from core.services.type_graph import build_type_graph, render_mermaid

logger = structlog.get_logger(__name__)


def synthesize(
    name: str,
    model: DocumentModel,
    options: DocumentationOptions | None = None,
    *,
    catalog: TypeCatalog | None = None,
) -> Documentation:
    options = options or DocumentationOptions()
    catalog = catalog or TypeCatalog.default()

    sections: list[TypeSection] = []
    for descriptor in model.types.values():
        sections.append(
            TypeSection(
                type_name=descriptor.name,
                table=build_property_table(descriptor),
                example=build_example_literal(descriptor, catalog) if options.examples else None,
                rules=build_validation_rules(descriptor, catalog) if options.validation_rules else None,
            )
        )

    graph = None
    if options.type_graph and not model.is_empty:
        graph = build_type_graph(model, match=options.reference_match)

    return Documentation(
        name=name,
        language=options.language,
        sections=sections,
        graph=graph,
    )


def render_markdown(documentation: Documentation, phrases: Phrasebook | None = None) -> str:
    phrases = phrases or phrasebook_for(documentation.language)
    chunks: list[str] = [f"{phrases.title_for(documentation.name)}\n"]

    for section in documentation.sections:
        chunks.append(f"## {section.type_name}\n")
        chunks.extend(render_property_table(section.table, phrases))
        if section.example is not None:
            chunks.append(f"{phrases.example_heading}\n")
            chunks.append("```typescript")
            chunks.append(section.example)
            chunks.append("```\n")
        if section.rules is not None:
            chunks.extend(render_validation_rules(section.type_name, section.rules, phrases))

    if documentation.graph is not None:
        chunks.append(f"{phrases.graph_heading}\n")
        chunks.append("```mermaid")
        chunks.append(render_mermaid(documentation.graph))
        chunks.append("```\n")

    return "\n".join(chunks)


def document_declarations(
    name: str,
    text: str,
    options: DocumentationOptions | None = None,
    *,
    catalog: TypeCatalog | None = None,
) -> DocumentationOutcome:
    """Extract, synthesize and render one document.

    The extractor and generators are total over arbitrary text; a failure here
    is reported on the outcome rather than raised.
    """

    options = options or DocumentationOptions()
    try:
        model = extract_declarations(text, body_scan=options.body_scan)
        documentation = synthesize(name, model, options, catalog=catalog)
        markdown = render_markdown(documentation)
    except Exception as exc:
        logger.error("documentation_failed", document=name, error=str(exc))
        return DocumentationOutcome(name=name, error=str(exc))

    logger.info(
        "documentation_assembled",
        document=name,
        types=len(model),
        fields=sum(len(t.fields) for t in model.types.values()),
    )
    return DocumentationOutcome(
        name=name,
        model=model,
        documentation=documentation,
        markdown=markdown,
    )
