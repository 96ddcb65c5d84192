"""Pipeline orchestration from input files to a rendered texel map."""

from .config import DEFAULT_OUTPUT_PATH, RenderConfig
from .run import RunReport, process, render_text

__all__ = [
    "DEFAULT_OUTPUT_PATH",
    "RenderConfig",
    "RunReport",
    "process",
    "render_text",
]
