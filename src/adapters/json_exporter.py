"""JSON export of the extracted `DocumentModel`.

Keeps the declaration order of types and fields so the file mirrors the
source document.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import DocumentModel


def export_model_json(*, model: DocumentModel, output_path: Path) -> Path:
    """Write `model` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = model.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path
