"""Paint resolved words as filled squares on a square RGBA canvas."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple, cast

import numpy as np
from tqdm import tqdm

from src.texels.records import AggregatedWord

DEFAULT_RESOLUTION = 256
OPAQUE = 255


def paint_order(words: Iterable[AggregatedWord]) -> List[AggregatedWord]:
    """Sort ascending by count and reverse, so the most frequent word is painted first."""
    ordered = sorted(words, key=lambda word: word.count)
    ordered.reverse()
    return ordered


def jitter(position_signal: int) -> int:
    """Offset applied to both axes, derived from the position signal."""
    return int(math.isqrt(max(int(position_signal), 0)))


def block_geometry(word: AggregatedWord, dim: int) -> Tuple[int, int, int]:
    """
    Return `(x, y, half_extent)` for a resolved word on a `dim`-pixel canvas.

    Coordinates are scaled by `dim` and truncated, then shifted on both axes
    by floor(sqrt(position_signal)). The half extent is count // 4, so words
    seen fewer than four times produce an empty block.
    """
    if word.coordinate is None:
        raise ValueError(f"Word '{word.word}' has no coordinate; resolve it before compositing.")
    shift = jitter(word.position_signal)
    x = int(word.coordinate.x * dim) + shift
    y = int(word.coordinate.y * dim) + shift
    return x, y, word.count // 4


def paint_block(canvas: np.ndarray, x: int, y: int, half_extent: int, rgba: Tuple[int, int, int, int]) -> None:
    """Fill columns [x - h, x + h) and rows [y - h, y + h), clipped to the canvas."""
    height, width = canvas.shape[:2]
    left = max(x - half_extent, 0)
    right = min(x + half_extent, width)
    top = max(y - half_extent, 0)
    bottom = min(y + half_extent, height)
    if left >= right or top >= bottom:
        return
    canvas[top:bottom, left:right] = rgba


def composite(words: Iterable[AggregatedWord], dim: int = DEFAULT_RESOLUTION) -> np.ndarray:
    """
    Render resolved words into a `(dim, dim, 4)` uint8 RGBA buffer.

    The buffer starts fully transparent. Words are painted in `paint_order`
    and later blocks overwrite earlier ones, so rare words end up on top.
    """
    if dim <= 0:
        raise ValueError("Canvas dimension must be a positive integer.")

    canvas = np.zeros((dim, dim, 4), dtype=np.uint8)
    ordered = paint_order(words)
    for word in tqdm(ordered, desc="Painting", leave=False):
        if not word.resolved:
            raise ValueError(f"Word '{word.word}' is only partially resolved; cannot composite.")
        color = cast(bytes, word.color)
        x, y, half_extent = block_geometry(word, dim)
        red, green, blue = color[0], color[1], color[2]
        paint_block(canvas, x, y, half_extent, (red, green, blue, OPAQUE))

    print(f"[render] Painted {len(ordered)} blocks on a {dim}x{dim} canvas")
    return canvas
