"""
Pytest configuration and shared fixtures.
"""
from __future__ import annotations

from typing import Any

import pytest
import structlog


USER_DECLARATIONS = """\
export interface User {
    id:    number;
    name:  string;
    email?: string;
}
"""

SHOP_DECLARATIONS = """\
export interface Order {
    id:       number;
    customer: Customer;
    items:    LineItem[];
    placedAt: Date;
    paid:     boolean;
}

export interface Customer {
    name:   string;
    orders?: Order[];
}

export interface LineItem {
    sku:      string;
    quantity: number;
}
"""


class FakeEngine:
    """Stands in for quicktype: returns canned declarations per document."""

    def __init__(self, declarations: dict[str, str] | None = None, default: str = USER_DECLARATIONS) -> None:
        self.declarations = declarations or {}
        self.default = default
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def generate(self, schema: dict[str, Any], name: str) -> str:
        self.calls.append((name, schema))
        return self.declarations.get(name, self.default)


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI tests configure structlog against CliRunner's streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def user_declarations() -> str:
    return USER_DECLARATIONS


@pytest.fixture
def shop_declarations() -> str:
    return SHOP_DECLARATIONS


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def user_schema() -> dict[str, Any]:
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "User",
        "type": "object",
        "properties": {
            "id": {"type": "number"},
            "name": {"type": "string"},
            "email": {"type": "string"},
        },
        "required": ["id", "name"],
    }
