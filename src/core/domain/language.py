"""Language utilities for typegen-docs.

This module centralizes the language options supported for generated
documentation. Keeping it in the domain layer allows the synthesizer, the
exporters and the CLI to share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for generated documentation."""

    ENGLISH = "en"
    CHINESE = "zh"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "Chinese" if self is Language.CHINESE else "English"
