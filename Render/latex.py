import logging
from pathlib import Path
from typing import Optional

import jinja2

from Render.settings import RenderConfig
from Semantics.models import Document

logger = logging.getLogger(__name__)


def create_latex_env(template_dir: str) -> jinja2.Environment:
    """Create Jinja2 environment with LaTeX-safe delimiters.

    Uses custom delimiters that do not conflict with LaTeX brace syntax:
    - Block tags: \\BLOCK{...}
    - Variable tags: \\VAR{...}
    - Comment tags: \\#{...}
    """
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(template_dir),
        block_start_string=r"\BLOCK{",
        block_end_string="}",
        variable_start_string=r"\VAR{",
        variable_end_string="}",
        comment_start_string=r"\#{",
        comment_end_string="}",
        line_comment_prefix="%#",
        trim_blocks=True,
        autoescape=False,
        undefined=jinja2.StrictUndefined,
    )


def render_document(document: Document, config: Optional[RenderConfig] = None) -> str:
    """Fill the LaTeX template with the document's header values and sections."""
    config = config or RenderConfig()
    env = create_latex_env(config.template_dir)
    template = env.get_template(config.template_name)
    return template.render(**document.as_template_params())


def write_document(document: Document, output_path: str, config: Optional[RenderConfig] = None) -> Path:
    """Render the document and write it to `output_path`."""
    tex = render_document(document, config)
    path = Path(output_path)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tex, encoding="utf-8")
    logger.info(f"Wrote {len(document.sections)} sections to {path}")
    return path
