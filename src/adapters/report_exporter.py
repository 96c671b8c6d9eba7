"""Writing documentation and declaration artifacts.

- Markdown is the synthesizer's own rendering.
- HTML is rendered from the structured `Documentation` with Jinja2
  (templates/documentation.html).
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import Documentation
from core.domain.vocabulary import Phrasebook, phrasebook_for
from core.project_config import DocFormat
from core.services.doc_synthesizer import render_markdown
from core.services.property_docs import describe_rule
from core.services.type_graph import render_mermaid


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        keep_trailing_newline=True,
    )
    env.globals["render_mermaid"] = render_mermaid
    env.globals["describe_rule"] = describe_rule
    return env


def render_documentation_html(
    documentation: Documentation,
    phrases: Phrasebook | None = None,
) -> str:
    """Render a self-contained HTML page for one document."""

    phrases = phrases or phrasebook_for(documentation.language)
    template = _get_env().get_template("documentation.html")
    return template.render(
        doc=documentation,
        phrases=phrases,
        title=phrases.title_for(documentation.name).lstrip("# "),
        lang=documentation.language.value,
    )


def export_documentation(
    *,
    documentation: Documentation,
    output_dir: Path,
    fmt: DocFormat = DocFormat.MARKDOWN,
) -> Path:
    """Write `<name>.md` or `<name>.html` into `output_dir`."""

    output_path = output_dir / f"{documentation.name}.{fmt.extension}"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if fmt is DocFormat.HTML:
        content = render_documentation_html(documentation)
    else:
        content = render_markdown(documentation)
    output_path.write_text(content, encoding="utf-8")
    return output_path


def export_declarations(*, text: str, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    return output_path
