"""Declaration extractor: declaration text → `DocumentModel`.

Headers are located with a regular expression and scanned in order of
appearance. Two body strategies exist:

- `BodyScanMode.NEAREST` ends a body at the first `}`, the next header or the
  end of input, whichever comes first. A field whose type is itself an inline
  block (`address: { street: string }`) is cut at the inner `}`.
- `BodyScanMode.BALANCED` tracks delimiter depth so inline blocks stay inside
  the type expression of the field that owns them.

Malformed text never raises: unmatched headers or members are skipped.
"""

from __future__ import annotations

import re

import structlog

from core.domain.models import (
    BodyScanMode,
    DocumentModel,
    FieldDescriptor,
    TypeDescriptor,
)

logger = structlog.get_logger(__name__)

_HEADER_RE = re.compile(
    r"\b(?:export\s+)?(?:declare\s+)?(?:interface|type|enum)\s+"
    r"(?P<name>[A-Za-z_$][\w$]*)"
    r"(?:\s*<[^{};]*?>)?"
    r"(?:\s+extends\s+[^{};=\n]+?)?"
    r"\s*(?P<open>=\s*\{|=|\{)"
)

_MEMBER_RE = re.compile(
    r"^(?:readonly\s+)?(?P<name>[A-Za-z_$][\w$]*)(?P<optional>\?)?\s*:\s*(?P<type>\S.*)$",
    re.DOTALL,
)

_NEAREST_SPLIT_RE = re.compile(r"[;\n]")

_OPENERS = "{[("
_CLOSERS = "}])"


def extract_declarations(
    text: str,
    *,
    body_scan: BodyScanMode = BodyScanMode.NEAREST,
) -> DocumentModel:
    """Build the `DocumentModel` for one document's declaration text."""

    text = text or ""
    headers = list(_HEADER_RE.finditer(text))
    types: dict[str, TypeDescriptor] = {}

    for index, header in enumerate(headers):
        next_start = headers[index + 1].start() if index + 1 < len(headers) else len(text)
        braced = header.group("open").endswith("{")

        if body_scan is BodyScanMode.BALANCED:
            body = _balanced_body(text, header.end(), next_start, braced=braced)
            segments = _split_top_level(body)
        else:
            body = _nearest_body(text, header.end(), next_start)
            segments = _NEAREST_SPLIT_RE.split(body)

        name = header.group("name")
        fields = tuple(f for f in (_parse_member(s) for s in segments) if f is not None)
        if name in types:
            logger.debug("declaration_redefined", type_name=name)
        types[name] = TypeDescriptor(name=name, fields=fields)

    logger.debug("declarations_extracted", types=len(types), body_scan=body_scan.value)
    return DocumentModel(types=types)


def _nearest_body(text: str, start: int, next_header: int) -> str:
    close = text.find("}", start, next_header)
    end = close if close != -1 else next_header
    return text[start:end]


def _balanced_body(text: str, start: int, next_header: int, *, braced: bool) -> str:
    depth = 0
    for pos in range(start, len(text)):
        ch = text[pos]
        if depth == 0 and not braced and pos >= next_header:
            return text[start:pos]
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            if depth == 0:
                if braced:
                    return text[start:pos]
                # Stray closer in an alias body.
                continue
            depth -= 1
        elif ch == ";" and depth == 0 and not braced:
            return text[start:pos]
    return text[start:]


def _split_top_level(body: str) -> list[str]:
    segments: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in body:
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS and depth > 0:
            depth -= 1
        elif ch in ";\n" and depth == 0:
            segments.append("".join(current))
            current = []
            continue
        current.append(ch)
    segments.append("".join(current))
    return segments


def _parse_member(segment: str) -> FieldDescriptor | None:
    match = _MEMBER_RE.match(segment.strip())
    if not match:
        return None
    type_expression = " ".join(match.group("type").split()).rstrip(",").rstrip()
    if not type_expression:
        return None
    return FieldDescriptor(
        name=match.group("name"),
        optional=match.group("optional") is not None,
        type_expression=type_expression,
    )
