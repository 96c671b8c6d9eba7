"""Generation and documentation orchestration.

The CLI delegates the whole flow to these helpers: obtain declarations for
each configured source (quicktype or a ready-made declaration file), append
companion types, write `<name>.ts`, then document it. Side-effects towards the
user (printing, spinners) stay in the CLI through `PipelineHooks`.

Each source is independent: documents are processed concurrently and a
failing source only produces a warning.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

import structlog

from adapters.json_exporter import export_model_json
from adapters.report_exporter import export_declarations, export_documentation
from adapters.schema_source import fetch_schema, read_declarations, source_name
from core.config import AppSettings
from core.domain.models import DocumentationOptions, DocumentationOutcome
from core.domain.vocabulary import TypeCatalog
from core.interfaces.type_engine import TypeGenerationEngine
from core.project_config import DocFormat, ProjectConfig, SchemaSource, SourceType
from core.services.doc_synthesizer import document_declarations
from core.services.type_transforms import augment_declarations

logger = structlog.get_logger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    warning: Callable[[str], None] | None = None
    document_start: Callable[[str], None] | None = None
    document_done: Callable[[str], None] | None = None


@dataclass
class DocumentArtifact:
    """Files produced for one document."""

    name: str
    declarations_path: Path | None = None
    documentation_path: Path | None = None
    model_path: Path | None = None
    outcome: DocumentationOutcome | None = None


@dataclass
class PipelineResult:
    artifacts: list[DocumentArtifact] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings


def _warn(message: str, warnings: list[str], hooks: PipelineHooks) -> None:
    logger.warning("pipeline_warning", message=message)
    warnings.append(message)
    if hooks.warning:
        hooks.warning(message)


async def _declarations_for(
    source: SchemaSource,
    name: str,
    *,
    settings: AppSettings,
    config: ProjectConfig,
    engine: TypeGenerationEngine,
) -> str:
    if source.type is SourceType.DECLARATIONS:
        return await asyncio.to_thread(read_declarations, source)
    schema = await fetch_schema(source, fmt=config.input.format, settings=settings)
    generated = await engine.generate(schema, name)
    return augment_declarations(generated, name, config.output)


async def generate_document(
    source: SchemaSource,
    *,
    settings: AppSettings,
    config: ProjectConfig,
    engine: TypeGenerationEngine,
) -> DocumentArtifact:
    """Full flow for one source; errors propagate to the caller."""

    name = source_name(source)
    declarations = await _declarations_for(
        source, name, settings=settings, config=config, engine=engine
    )
    artifact = DocumentArtifact(name=name)
    artifact.declarations_path = await asyncio.to_thread(
        export_declarations,
        text=declarations,
        output_path=config.output_dir() / f"{name}.ts",
    )

    doc_config = config.documentation
    if doc_config and doc_config.enabled:
        outcome = document_declarations(
            name,
            declarations,
            doc_config.options(default_language=settings.default_language),
            catalog=doc_config.catalog(),
        )
        artifact.outcome = outcome
        if not outcome.ok or outcome.documentation is None:
            raise RuntimeError(f"documentation could not be assembled: {outcome.error}")
        artifact.documentation_path = await asyncio.to_thread(
            export_documentation,
            documentation=outcome.documentation,
            output_dir=config.documentation_dir(),
            fmt=doc_config.format,
        )
    return artifact


def _unique_sources(
    sources: Iterable[SchemaSource],
    warnings: list[str],
    hooks: PipelineHooks,
) -> list[SchemaSource]:
    """Drop sources whose document name is already taken; their files would collide."""

    seen: dict[str, str] = {}
    unique: list[SchemaSource] = []
    for source in sources:
        name = source_name(source)
        if name in seen:
            _warn(
                f"Skipping {source.path}: document name '{name}' is already used by {seen[name]}",
                warnings,
                hooks,
            )
            continue
        seen[name] = source.path
        unique.append(source)
    return unique


async def generate_all(
    *,
    settings: AppSettings,
    config: ProjectConfig,
    engine: TypeGenerationEngine,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Process every configured source; failures become warnings."""

    hooks = hooks or PipelineHooks()
    warnings: list[str] = []
    semaphore = asyncio.Semaphore(settings.max_concurrency)

    async def safe_generate(source: SchemaSource) -> DocumentArtifact | None:
        name = source_name(source)
        async with semaphore:
            if hooks.document_start:
                hooks.document_start(name)
            try:
                artifact = await generate_document(
                    source, settings=settings, config=config, engine=engine
                )
            except Exception as exc:
                _warn(f"Error while processing {name}: {exc}", warnings, hooks)
                return None
            if hooks.document_done:
                hooks.document_done(name)
            return artifact

    sources = _unique_sources(config.input.sources, warnings, hooks)
    results = await asyncio.gather(*(safe_generate(s) for s in sources))
    artifacts = [a for a in results if a is not None]
    logger.info("pipeline_finished", documents=len(artifacts), warnings=len(warnings))
    return PipelineResult(artifacts=artifacts, warnings=warnings)


def document_files(
    paths: Iterable[Path],
    *,
    output_dir: Path,
    options: DocumentationOptions | None = None,
    catalog: TypeCatalog | None = None,
    fmt: DocFormat = DocFormat.MARKDOWN,
    export_json: bool = False,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Document existing declaration files without running the engine."""

    hooks = hooks or PipelineHooks()
    warnings: list[str] = []
    artifacts: list[DocumentArtifact] = []

    for path in paths:
        source = SchemaSource(type=SourceType.DECLARATIONS, path=str(path))
        name = source_name(source)
        try:
            text = read_declarations(source)
        except Exception as exc:
            _warn(f"Error while processing {name}: {exc}", warnings, hooks)
            continue

        outcome = document_declarations(name, text, options, catalog=catalog)
        if not outcome.ok or outcome.documentation is None:
            _warn(f"Error while processing {name}: {outcome.error}", warnings, hooks)
            continue

        artifact = DocumentArtifact(name=name, outcome=outcome)
        artifact.documentation_path = export_documentation(
            documentation=outcome.documentation,
            output_dir=output_dir,
            fmt=fmt,
        )
        if export_json and outcome.model is not None:
            artifact.model_path = export_model_json(
                model=outcome.model,
                output_path=output_dir / f"{name}.model.json",
            )
        artifacts.append(artifact)

    return PipelineResult(artifacts=artifacts, warnings=warnings)
