"""Project configuration file (YAML).

- `AppSettings` (core/config.py) covers the environment; this module covers
  the per-project file that lists schema sources, output options and
  documentation switches.
- Keys are camelCase in YAML (`componentProps`, `outputDir`, ...) and
  snake_case in Python; unknown keys are ignored.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from core.domain.language import Language
from core.domain.models import (
    BodyScanMode,
    DocumentationOptions,
    ReferenceMatch,
    TypeCategory,
)
from core.domain.vocabulary import TypeCatalog


class ConfigError(Exception):
    """The configuration file could not be read or failed validation."""

    def __init__(self, message: str, issues: list[str] | None = None) -> None:
        super().__init__(message)
        self.issues = issues or []


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SourceType(str, Enum):
    FILE = "file"
    API = "api"
    DECLARATIONS = "declarations"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class SchemaFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


class DeclarationStyle(str, Enum):
    INTERFACE = "interface"
    TYPE = "type"


class DocFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"

    @property
    def extension(self) -> str:
        return "md" if self is DocFormat.MARKDOWN else "html"


class SchemaSource(_ConfigModel):
    """Where one schema (or ready-made declaration file) comes from."""

    type: SourceType
    path: str = Field(..., min_length=1, description="File path or URL.")
    method: HttpMethod | None = None
    headers: dict[str, str] | None = None


class InputConfig(_ConfigModel):
    sources: list[SchemaSource]
    format: SchemaFormat = SchemaFormat.JSON


class OutputFeatures(_ConfigModel):
    component_props: bool = True
    api_response: bool = True
    hook_return_types: bool = True
    store_types: bool = False


class NamingConfig(_ConfigModel):
    props_prefix: str = ""
    props_suffix: str = "Props"
    response_prefix: str = ""
    response_suffix: str = "Response"
    hook_prefix: str = "Use"
    hook_suffix: str = "Result"
    store_prefix: str = ""
    store_suffix: str = "State"


class OutputConfig(_ConfigModel):
    dir: str
    style: DeclarationStyle = DeclarationStyle.INTERFACE
    features: OutputFeatures = Field(default_factory=OutputFeatures)
    naming: NamingConfig = Field(default_factory=NamingConfig)


class DocumentationFeatures(_ConfigModel):
    examples: bool = True
    type_graph: bool = True
    validation_rules: bool = True


class DocumentationConfig(_ConfigModel):
    enabled: bool = True
    format: DocFormat = DocFormat.MARKDOWN
    output_dir: str | None = None
    language: Language | None = None
    features: DocumentationFeatures = Field(default_factory=DocumentationFeatures)
    body_scan: BodyScanMode = BodyScanMode.NEAREST
    reference_match: ReferenceMatch = ReferenceMatch.SUBSTRING
    type_categories: dict[str, TypeCategory] = Field(default_factory=dict)

    def options(self, default_language: Language = Language.ENGLISH) -> DocumentationOptions:
        """Synthesizer options; `default_language` applies when `language` is unset."""

        return DocumentationOptions(
            examples=self.features.examples,
            type_graph=self.features.type_graph,
            validation_rules=self.features.validation_rules,
            language=self.language or default_language,
            body_scan=self.body_scan,
            reference_match=self.reference_match,
        )

    def catalog(self) -> TypeCatalog:
        return TypeCatalog.default().extend(self.type_categories)


class ProjectConfig(_ConfigModel):
    input: InputConfig
    output: OutputConfig
    documentation: DocumentationConfig | None = None

    def output_dir(self) -> Path:
        return Path(self.output.dir).resolve()

    def documentation_dir(self) -> Path:
        if self.documentation and self.documentation.output_dir:
            return Path(self.documentation.output_dir).resolve()
        return self.output_dir() / "docs"


def format_validation_issues(error: ValidationError) -> list[str]:
    issues: list[str] = []
    for err in error.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        issues.append(f"{location}: {err.get('msg', 'invalid value')}")
    return issues


def parse_project_config(data: object) -> ProjectConfig:
    try:
        return ProjectConfig.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigError("Config file validation failed", format_validation_issues(exc)) from exc


def load_project_config(path: Path) -> ProjectConfig:
    """Read and validate a YAML (or JSON) project config file."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to load config file: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to load config file: {exc}") from exc

    return parse_project_config(data)
