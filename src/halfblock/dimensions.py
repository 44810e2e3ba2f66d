import logging
import math
from dataclasses import dataclass
from typing import NamedTuple

from halfblock.terminal import DEFAULT_ROWS, TerminalSize

# Text rows reserved below each frame by the in-place screen updater
ROW_OFFSET = 2

logger = logging.getLogger(__name__)

Dimension = int | float | str | None


class InvalidDimensionError(ValueError):
    """A width or height is neither a positive number nor an "N%" string."""


@dataclass(frozen=True)
class DimensionRequest:
    width: Dimension = None
    height: Dimension = None
    preserve_aspect_ratio: bool = False


class TargetSize(NamedTuple):
    width: int
    height: int


def scale(box_width: float, box_height: float, natural_width: float, natural_height: float) -> tuple[float, float]:
    """Best-fit a natural size into a box without distortion.

    Whichever side is proportionally tighter sets the factor, so the result
    fills the box along one axis and fits inside it along the other.
    """
    if box_width / box_height > natural_width / natural_height:
        factor = box_height / natural_height
    else:
        factor = box_width / natural_width
    return factor * natural_width, factor * natural_height


def parse_dimension(value: Dimension, base: int) -> int | float:
    """Resolve an absolute cell count or an "N%" string against ``base`` cells."""
    if isinstance(value, str) and value.endswith("%"):
        try:
            percentage = float(value[:-1])
        except ValueError:
            percentage = math.nan
        if math.isfinite(percentage) and 0 < percentage <= 100:
            # Never less than one cell, even for tiny percentages of small terminals
            return max(1, math.floor(percentage / 100 * base))
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isfinite(value) and value > 0:
            return value
    raise InvalidDimensionError(f"{value!r} is not a valid dimension value")


def _round(value: float) -> int:
    # Half up, not Python's round-half-to-even
    return max(1, math.floor(value + 0.5))


def cell_budget(terminal_size: TerminalSize) -> tuple[int, int]:
    """Columns and text rows available for a frame."""
    rows = terminal_size.rows - ROW_OFFSET
    if rows <= 0:
        rows = DEFAULT_ROWS
    return terminal_size.columns, rows


def resolve(image_width: int, image_height: int, request: DimensionRequest, terminal_size: TerminalSize) -> TargetSize:
    """Compute the pixel size an image must be resized to before quantization.

    Each text row holds two pixel rows, so heights given in rows (absolute or
    as a percentage of the terminal) are doubled. Whatever the request, the
    width never ends up wider than the terminal.
    """
    if image_width <= 0 or image_height <= 0:
        raise InvalidDimensionError(f"image has no pixels ({image_width}x{image_height})")

    columns, rows = cell_budget(terminal_size)

    if request.width is not None and request.height is not None:
        width = parse_dimension(request.width, columns)
        height = parse_dimension(request.height, rows) * 2
        if request.preserve_aspect_ratio:
            width, height = scale(width, height, image_width, image_height)
    elif request.width is not None:
        width = parse_dimension(request.width, columns)
        height = image_height * width / image_width
    elif request.height is not None:
        height = parse_dimension(request.height, rows) * 2
        width = image_width * height / image_height
    else:
        width, height = scale(columns, rows * 2, image_width, image_height)

    if width > columns:
        width, height = scale(columns, rows * 2, width, height)

    target = TargetSize(_round(width), _round(height))
    logger.debug("resolved %dx%d to %dx%d for %dx%d cells", image_width, image_height, *target, columns, rows)
    return target
