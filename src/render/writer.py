"""Serialize RGBA canvases to disk."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image


def write_png(canvas: np.ndarray, path: Path) -> Path:
    """Save a `(height, width, 4)` uint8 buffer as an RGBA PNG."""
    if canvas.ndim != 3 or canvas.shape[2] != 4:
        raise ValueError("canvas must have shape (height, width, 4)")
    path.parent.mkdir(parents=True, exist_ok=True)
    image = Image.fromarray(np.ascontiguousarray(canvas, dtype=np.uint8))
    image.save(path, "PNG")
    print(f"[render] Saved {image.width}x{image.height} image → {path}")
    return path
