"""
Settings for rendering translated sheets into LaTeX documents.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from Utils.helpers import read_yaml_file

DEFAULT_TEMPLATE_DIR = str(Path(__file__).parent / "templates")
DEFAULT_TEMPLATE_NAME = "template.tex"
DEFAULT_OUTPUT = "output.tex"


@dataclass
class RenderConfig:
    """Where the LaTeX template lives and where the rendered document goes."""

    template_dir: str = DEFAULT_TEMPLATE_DIR
    template_name: str = DEFAULT_TEMPLATE_NAME
    output: str = DEFAULT_OUTPUT


def load_render_config(config_path: Optional[str] = None) -> RenderConfig:
    """Load render settings from a YAML file, falling back to the bundled template."""
    if config_path is None:
        return RenderConfig()

    data = read_yaml_file(config_path)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(RenderConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {unknown}. Available: {sorted(known)}")

    config = RenderConfig(**{key: str(value) for key, value in data.items()})
    # relative template dirs are resolved against the config file
    if not Path(config.template_dir).is_absolute():
        config.template_dir = str(Path(config_path).parent / config.template_dir)
    return config
