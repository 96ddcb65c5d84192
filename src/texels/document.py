"""Document reading and literal whitespace tokenization."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from .config import DOCUMENT_SUBSTITUTIONS, TOKEN_SEPARATOR


def split_document(text: str, substitutions: Sequence[str] = DOCUMENT_SUBSTITUTIONS) -> List[str]:
    """Replace every substitution literal with a space and split on single spaces."""
    for literal in substitutions:
        text = text.replace(literal, TOKEN_SEPARATOR)
    return text.split(TOKEN_SEPARATOR)


def read_document(path: Path) -> str:
    """Load a UTF-8 document from disk; invalid bytes raise UnicodeDecodeError."""
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    return path.read_text(encoding="utf-8")
