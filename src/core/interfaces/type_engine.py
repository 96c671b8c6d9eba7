"""Contract for schema-to-type generation engines.

The engine is an external collaborator (quicktype in production, a fake in
tests); the pipeline only needs the declaration text it returns.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class TypeGenerationError(Exception):
    """The engine could not turn a schema into declarations."""


@runtime_checkable
class TypeGenerationEngine(Protocol):
    """Minimal contract for a type generator.

    - `generate` is async because engines typically run a subprocess.
    - Returns TypeScript declaration text for the schema.
    """

    async def generate(self, schema: dict[str, Any], name: str) -> str:
        """Generate declarations for `schema`, using `name` as the top-level type."""

        ...
