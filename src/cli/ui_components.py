"""CLI UI components (Rich).

Tables and panels shared by the `generate` and `document` commands.
"""

from __future__ import annotations

from pathlib import Path

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.services.doc_pipeline import DocumentArtifact, PipelineResult


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in --stdout/quiet modes)."""

    title = Text("typegen-docs", style="bold cyan")
    subtitle = Text("Schema → Types → Documentation", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _display_path(path: Path | None) -> str:
    if path is None:
        return "-"
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def build_artifacts_table(artifacts: list[DocumentArtifact]) -> Table:
    table = Table(title="Generated documents")
    table.add_column("Document", style="cyan", no_wrap=True)
    table.add_column("Types", style="white", justify="right")
    table.add_column("Fields", style="white", justify="right")
    table.add_column("Declarations", style="magenta")
    table.add_column("Documentation", style="green")

    for artifact in artifacts:
        model = artifact.outcome.model if artifact.outcome else None
        types = str(len(model)) if model is not None else "-"
        fields = str(sum(len(t.fields) for t in model.types.values())) if model is not None else "-"
        table.add_row(
            artifact.name,
            types,
            fields,
            _display_path(artifact.declarations_path),
            _display_path(artifact.documentation_path),
        )
    return table


def build_summary_panel(result: PipelineResult) -> Panel:
    body = Text()
    body.append(f"Documents: {len(result.artifacts)}\n")
    if result.warnings:
        body.append(f"Warnings: {len(result.warnings)}\n", style="yellow")
        for warning in result.warnings:
            body.append(f"- {warning}\n", style="yellow")
    else:
        body.append("Warnings: 0", style="green")
    style = "yellow" if result.warnings else "green"
    return Panel(body, title=Text("Summary", style=f"bold {style}"), border_style=style)
