"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.quicktype_engine import QuicktypeEngine
from adapters.report_exporter import render_documentation_html
from core.config import AppSettings, write_user_env_vars
from core.config_locator import find_config_file
from core.domain.language import Language
from core.interfaces.type_engine import TypeGenerationError
from core.project_config import ConfigError, load_project_config
from core.services.doc_synthesizer import document_declarations

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_SAMPLE_DECLARATIONS = "export interface Doctor {\n  id: number;\n  name?: string;\n}\n"


def _check_quicktype(settings: AppSettings) -> tuple[bool, str]:
    try:
        version = asyncio.run(QuicktypeEngine(settings).version())
        return True, version or "OK"
    except TypeGenerationError as exc:
        return False, str(exc)


def _check_config(path: Path) -> tuple[str, str]:
    located = find_config_file(path)
    if located is None:
        return "MISSING", f"{path} not found"
    try:
        config = load_project_config(located)
    except ConfigError as exc:
        detail = "; ".join(exc.issues) or str(exc)
        return "FAIL", detail
    return "OK", f"{located} ({len(config.input.sources)} sources)"


def _check_rendering() -> tuple[bool, str]:
    """Document a tiny declaration and render it as HTML."""

    outcome = document_declarations("doctor", _SAMPLE_DECLARATIONS)
    if not outcome.ok or outcome.documentation is None:
        return False, outcome.error or "no documentation"
    try:
        render_documentation_html(outcome.documentation)
    except Exception as exc:
        return False, str(exc)
    return True, "Markdown + HTML OK"


@app.command()
def run(
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file to validate."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="typegen-docs Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_qt, detail_qt = _check_quicktype(settings)
    table.add_row("quicktype", "OK" if ok_qt else "FAIL", detail_qt)

    status_cfg, detail_cfg = _check_config(config or settings.default_config_path)
    table.add_row("Config file", status_cfg, detail_cfg)

    ok_render, detail_render = _check_rendering()
    table.add_row("Rendering", "OK" if ok_render else "FAIL", detail_render)

    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Concurrency", "OK", str(settings.max_concurrency))

    _console.print(table)

    if not ok_qt:
        _console.print(
            "\n[yellow]Note:[/yellow] without quicktype, use `declarations` sources or "
            "`typegen-docs document` on existing .ts files."
        )


@app.command()
def configure() -> None:
    """Interactive setup (stores settings in the user config .env)."""

    settings = AppSettings()

    command = typer.prompt(
        "quicktype command",
        default=settings.quicktype_command,
        show_default=True,
    ).strip()
    language = typer.prompt(
        "Documentation language (en/zh)",
        default=settings.default_language.value,
        show_default=True,
    ).strip().lower()

    if not command:
        raise typer.BadParameter("quicktype command is required")
    try:
        Language(language)
    except ValueError as exc:
        raise typer.BadParameter(f"unsupported language: {language}") from exc

    env_path = write_user_env_vars(
        {
            "TYPEGEN_DOCS_QUICKTYPE_COMMAND": command,
            "TYPEGEN_DOCS_DEFAULT_LANGUAGE": language,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
