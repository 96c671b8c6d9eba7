"""Lookup tables used by the documentation generators.

- `TypeCatalog` maps primitive type tokens to a `TypeCategory` and each
  category to a sample value for example literals.
- `Phrasebook` holds every user-facing phrase of the generated documentation
  for one language.

Both are immutable values handed to the generators explicitly.
"""

from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.language import Language
from core.domain.models import TypeCategory


_DEFAULT_TOKENS: dict[str, TypeCategory] = {
    "string": TypeCategory.TEXT,
    "number": TypeCategory.NUMERIC,
    "bigint": TypeCategory.NUMERIC,
    "boolean": TypeCategory.BOOLEAN,
    "Date": TypeCategory.TEMPORAL,
}

_DEFAULT_SAMPLES: dict[TypeCategory, str] = {
    TypeCategory.TEXT: '"example"',
    TypeCategory.NUMERIC: "123",
    TypeCategory.BOOLEAN: "true",
    TypeCategory.TEMPORAL: "new Date()",
    TypeCategory.STRUCTURED: "{}",
}


class TypeCatalog(BaseModel):
    """Token → category classification plus per-category sample values."""

    model_config = ConfigDict(frozen=True)

    tokens: dict[str, TypeCategory] = Field(default_factory=lambda: dict(_DEFAULT_TOKENS))
    samples: dict[TypeCategory, str] = Field(default_factory=lambda: dict(_DEFAULT_SAMPLES))

    @classmethod
    def default(cls) -> "TypeCatalog":
        return cls()

    def classify(self, type_expression: str) -> TypeCategory:
        """Category of a type expression; unknown expressions are `STRUCTURED`."""

        return self.tokens.get(type_expression.strip(), TypeCategory.STRUCTURED)

    def sample_for(self, type_expression: str) -> str:
        category = self.classify(type_expression)
        return self.samples.get(category, _DEFAULT_SAMPLES[TypeCategory.STRUCTURED])

    def extend(self, tokens: Mapping[str, TypeCategory]) -> "TypeCatalog":
        """Return a new catalog with extra (or overriding) token mappings."""

        if not tokens:
            return self
        merged = {**self.tokens, **{k.strip(): TypeCategory(v) for k, v in tokens.items()}}
        return TypeCatalog(tokens=merged, samples=dict(self.samples))


class Phrasebook(BaseModel):
    """User-facing phrases of the generated documentation."""

    model_config = ConfigDict(frozen=True)

    title: str
    table_header: str
    table_separator: str = "|------|------|------|------|"
    yes: str
    no: str
    no_fields: str
    example_heading: str
    rules_heading: str
    graph_heading: str
    required: str
    optional: str
    categories: dict[TypeCategory, str]

    def title_for(self, name: str) -> str:
        return self.title.format(name=name)

    def rules_heading_for(self, type_name: str) -> str:
        return self.rules_heading.format(type_name=type_name)

    def category_phrase(self, category: TypeCategory) -> str:
        return self.categories.get(category, self.categories[TypeCategory.STRUCTURED])


_PHRASEBOOKS: dict[Language, Phrasebook] = {
    Language.ENGLISH: Phrasebook(
        title="# {name} Type Definitions",
        table_header="| Property | Type | Required | Description |",
        yes="Yes",
        no="No",
        no_fields="_No fields found._",
        example_heading="### Example",
        rules_heading="### {type_name} Validation Rules",
        graph_heading="## Type Graph",
        required="required",
        optional="optional",
        categories={
            TypeCategory.TEXT: "string value",
            TypeCategory.NUMERIC: "number value",
            TypeCategory.BOOLEAN: "boolean value",
            TypeCategory.TEMPORAL: "date value",
            TypeCategory.STRUCTURED: "structured object",
        },
    ),
    Language.CHINESE: Phrasebook(
        title="# {name} 类型定义",
        table_header="| 属性 | 类型 | 必填 | 描述 |",
        yes="是",
        no="否",
        no_fields="_未找到属性。_",
        example_heading="### 示例",
        rules_heading="### {type_name} 验证规则",
        graph_heading="## 类型关系图",
        required="必填",
        optional="可选",
        categories={
            TypeCategory.TEXT: "字符串类型",
            TypeCategory.NUMERIC: "数字类型",
            TypeCategory.BOOLEAN: "布尔类型",
            TypeCategory.TEMPORAL: "日期类型",
            TypeCategory.STRUCTURED: "对象类型",
        },
    ),
}


def phrasebook_for(language: Language) -> Phrasebook:
    return _PHRASEBOOKS[Language(language)]
