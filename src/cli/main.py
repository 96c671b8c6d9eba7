"""typegen-docs command line interface.

Commands:
- `generate`: config file → schemas → quicktype → `.ts` + documentation.
- `document`: documentation straight from existing declaration files.
- `doctor`: environment diagnostics (see cli/doctor.py).
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from adapters.quicktype_engine import QuicktypeEngine
from adapters.schema_source import SchemaSourceError, read_declarations, source_name
from cli import doctor
from cli.ui_components import build_artifacts_table, build_summary_panel, print_banner
from core.config import AppSettings
from core.config_locator import find_config_file
from core.domain.language import Language
from core.domain.models import BodyScanMode, DocumentationOptions, ReferenceMatch
from core.domain.vocabulary import TypeCatalog
from core.project_config import (
    ConfigError,
    DocFormat,
    ProjectConfig,
    SchemaSource,
    SourceType,
    load_project_config,
)
from core.services.doc_pipeline import PipelineHooks, document_files, generate_all
from core.services.doc_synthesizer import document_declarations

app = typer.Typer(
    name="typegen-docs",
    no_args_is_help=True,
    add_completion=False,
    help="Generate TypeScript types from JSON schemas and document them.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """structlog to stderr; WARNING by default, DEBUG with --verbose."""

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _print_config_error(exc: ConfigError) -> None:
    _err_console.print(f"[red]{escape(str(exc))}[/red]")
    for issue in exc.issues:
        _err_console.print(f"[red]- {escape(issue)}[/red]")


def load_config_or_exit(config: Path | None, settings: AppSettings) -> ProjectConfig:
    config_path = config or settings.default_config_path
    located = find_config_file(config_path)
    if located is None:
        _err_console.print(f"[red]Config file not found: {config_path}[/red]")
        raise typer.Exit(1)
    try:
        return load_project_config(located)
    except ConfigError as exc:
        _print_config_error(exc)
        raise typer.Exit(1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed logs."),
) -> None:
    configure_logging(verbose)


@app.command()
def generate(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file path (default: ./type-gen.config.yml).",
    ),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the banner."),
) -> None:
    """Generate type files and documentation for every configured source."""

    settings = AppSettings()
    project = load_config_or_exit(config, settings)

    if banner:
        print_banner(_console)

    engine = QuicktypeEngine(settings)
    with _console.status("Generating type files...") as status:
        total = len(project.input.sources)
        done: list[str] = []

        def on_done(name: str) -> None:
            done.append(name)
            status.update(f"Generated {name} ({len(done)}/{total})")

        hooks = PipelineHooks(
            document_start=lambda name: status.update(f"Processing {name}"),
            document_done=on_done,
        )
        try:
            result = asyncio.run(
                generate_all(settings=settings, config=project, engine=engine, hooks=hooks)
            )
        except Exception as exc:
            _err_console.print("[red]Generation failed[/red]")
            _err_console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(1) from exc

    if result.artifacts:
        _console.print(build_artifacts_table(result.artifacts))
    _console.print(build_summary_panel(result))
    _console.print("[green]Type files generated[/green]")


@app.command()
def document(
    paths: list[Path] = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Declaration files (.ts / .d.ts).",
    ),
    output_dir: Path = typer.Option(Path("docs"), "--output-dir", "-o", help="Output directory."),
    fmt: DocFormat = typer.Option(DocFormat.MARKDOWN, "--format", "-f", help="markdown or html."),
    language: Language | None = typer.Option(None, "--lang", help="Documentation language (en/zh)."),
    examples: bool = typer.Option(True, "--examples/--no-examples", help="Include example literals."),
    graph: bool = typer.Option(True, "--graph/--no-graph", help="Include the type graph."),
    rules: bool = typer.Option(True, "--rules/--no-rules", help="Include validation rules."),
    body_scan: BodyScanMode = typer.Option(
        BodyScanMode.NEAREST,
        "--body-scan",
        help="nearest: stop at the first '}'; balanced: track nested blocks.",
    ),
    reference_match: ReferenceMatch = typer.Option(
        ReferenceMatch.SUBSTRING,
        "--reference-match",
        help="substring: plain containment; word: whole identifiers only.",
    ),
    export_json: bool = typer.Option(False, "--json", help="Also write <name>.model.json."),
    stdout: bool = typer.Option(False, "--stdout", help="Print Markdown instead of writing files."),
) -> None:
    """Document existing declaration files."""

    settings = AppSettings()
    options = DocumentationOptions(
        examples=examples,
        type_graph=graph,
        validation_rules=rules,
        language=language or settings.default_language,
        body_scan=body_scan,
        reference_match=reference_match,
    )
    catalog = TypeCatalog.default()

    if stdout:
        failed = False
        for path in paths:
            source = SchemaSource(type=SourceType.DECLARATIONS, path=str(path))
            try:
                text = read_declarations(source)
            except SchemaSourceError as exc:
                failed = True
                _err_console.print(f"[yellow]Error while processing {path}: {escape(str(exc))}[/yellow]")
                continue
            outcome = document_declarations(source_name(source), text, options, catalog=catalog)
            if outcome.ok and outcome.markdown is not None:
                typer.echo(outcome.markdown)
            else:
                failed = True
                _err_console.print(f"[yellow]Error while processing {path}: {escape(str(outcome.error))}[/yellow]")
        if failed:
            raise typer.Exit(1)
        return

    hooks = PipelineHooks(warning=lambda message: _err_console.print(f"[yellow]{escape(message)}[/yellow]"))
    result = document_files(
        paths,
        output_dir=output_dir,
        options=options,
        catalog=catalog,
        fmt=fmt,
        export_json=export_json,
        hooks=hooks,
    )
    if result.artifacts:
        _console.print(build_artifacts_table(result.artifacts))
    if not result.artifacts and result.warnings:
        raise typer.Exit(1)


def run() -> None:
    app()
