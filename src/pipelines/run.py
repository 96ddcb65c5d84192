"""End-to-end orchestration: dictionary + document → PNG."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import numpy as np

from src.lexicon.index import LexiconIndex
from src.lexicon.loader import load_dictionary
from src.render.compositor import composite
from src.render.writer import write_png
from src.texels.aggregate import aggregate_tokens
from src.texels.document import read_document, split_document
from src.texels.resolve import resolve_words

from .config import RenderConfig


@dataclass(frozen=True)
class RunReport:
    """Diagnostics collected during a single pipeline run."""

    tokens: int
    words: int
    resolved: int
    unknown: int
    approximate: int
    dictionary_entries: int
    dictionary_skipped: int
    output_path: Optional[Path]


def render_text(
    text: str,
    index: LexiconIndex,
    resolution: int,
    max_distance: int,
    color_size: int,
) -> tuple[np.ndarray, RunReport]:
    """Run tokenization, aggregation, resolution and compositing on in-memory text."""
    tokens = split_document(text)
    print(f"[texels] Split document into {len(tokens)} raw tokens")
    words = aggregate_tokens(tokens)
    print(f"[texels] Aggregated {len(words)} distinct words")
    result = resolve_words(index, words, max_distance=max_distance, color_size=color_size)
    canvas = composite(result.words, dim=resolution)

    report = RunReport(
        tokens=len(tokens),
        words=len(words),
        resolved=len(result.words),
        unknown=result.unknown,
        approximate=result.approximate,
        dictionary_entries=len(index),
        dictionary_skipped=0,
        output_path=None,
    )
    return canvas, report


def process(config: RenderConfig) -> RunReport:
    """
    Render the configured document into an image and return run diagnostics.

    Both input files are read before anything is written, so a missing
    dictionary or document aborts the run without producing an image.
    """
    config.validate()

    dictionary = load_dictionary(config.dictionary_path)
    text = read_document(config.input_path)

    canvas, report = render_text(
        text,
        dictionary.index,
        resolution=config.resolution,
        max_distance=config.max_distance,
        color_size=config.color_size,
    )
    output_path = write_png(canvas, config.output_path)

    return replace(report, dictionary_skipped=dictionary.skipped, output_path=output_path)
