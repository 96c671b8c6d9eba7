"""Dependency graph between the types of one document.

An edge `A → B` is recorded when B's name occurs in a field type expression of
A. With `ReferenceMatch.SUBSTRING` the test is plain containment, so `Id` is a
target of any type mentioning `UserId`. `ReferenceMatch.WORD` only accepts
whole-identifier occurrences.
"""

from __future__ import annotations

import re

from core.domain.models import DocumentModel, GraphEdge, ReferenceMatch, TypeGraph


def _references(type_expression: str, target: str, match: ReferenceMatch) -> bool:
    if match is ReferenceMatch.WORD:
        pattern = rf"(?<![\w$]){re.escape(target)}(?![\w$])"
        return re.search(pattern, type_expression) is not None
    return target in type_expression


def build_type_graph(
    model: DocumentModel,
    *,
    match: ReferenceMatch = ReferenceMatch.SUBSTRING,
) -> TypeGraph:
    """Edges grouped by source in model order; targets in model order."""

    names = model.type_names
    edges: list[GraphEdge] = []
    for source in names:
        expressions = [f.type_expression for f in model.types[source].fields]
        for target in names:
            if any(_references(expr, target, match) for expr in expressions):
                edges.append(GraphEdge(source=source, target=target))
    return TypeGraph(nodes=names, edges=edges)


def render_mermaid(graph: TypeGraph) -> str:
    lines = ["graph TD;"]
    lines.extend(f"  {edge.source}-->{edge.target}" for edge in graph.edges)
    return "\n".join(lines)
