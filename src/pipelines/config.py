"""Run configuration for the texel-map pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from src.render.compositor import DEFAULT_RESOLUTION
from src.texels.config import DEFAULT_COLOR_SIZE, DEFAULT_MAX_DISTANCE

DEFAULT_OUTPUT_PATH = Path("out.png")

# Colors need three digest bytes; BLAKE2b caps digests at 64.
MIN_COLOR_SIZE = 3
MAX_COLOR_SIZE = 64


@dataclass(frozen=True)
class RenderConfig:
    """Inputs, output and tuning knobs for one `process` call."""

    input_path: Path
    dictionary_path: Path
    output_path: Path = DEFAULT_OUTPUT_PATH
    resolution: int = DEFAULT_RESOLUTION
    max_distance: int = DEFAULT_MAX_DISTANCE
    color_size: int = DEFAULT_COLOR_SIZE

    def validate(self) -> None:
        if self.resolution <= 0:
            raise ValueError("resolution must be a positive integer.")
        if self.max_distance < 0:
            raise ValueError("max_distance must be non-negative.")
        if not MIN_COLOR_SIZE <= self.color_size <= MAX_COLOR_SIZE:
            raise ValueError(f"color_size must fall within [{MIN_COLOR_SIZE}, {MAX_COLOR_SIZE}].")


__all__ = ["DEFAULT_OUTPUT_PATH", "RenderConfig"]
