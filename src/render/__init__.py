"""Canvas compositing and PNG output."""

from .compositor import DEFAULT_RESOLUTION, block_geometry, composite, paint_block, paint_order
from .writer import write_png

__all__ = [
    "DEFAULT_RESOLUTION",
    "block_geometry",
    "composite",
    "paint_block",
    "paint_order",
    "write_png",
]
