import io
import logging
from pathlib import Path
from typing import Callable

from PIL import Image

from halfblock.dimensions import Dimension, DimensionRequest, TargetSize, resolve
from halfblock.engine import RawImage, RenderedFrame
from halfblock.quantizer import quantize
from halfblock.terminal import TerminalSize, get_terminal_size

logger = logging.getLogger(__name__)

ImageSource = Image.Image | RawImage | bytes | bytearray | str | Path


def load_image(source: Image.Image | bytes | bytearray | str | Path) -> Image.Image:
    """Decode encoded image bytes or a file into an RGBA image.

    Pillow's decode errors (``UnidentifiedImageError``, ``OSError``) propagate
    unchanged.
    """
    if isinstance(source, (bytes, bytearray)):
        source = Image.open(io.BytesIO(source))
    elif not isinstance(source, Image.Image):
        source = Image.open(source)
    return source.convert("RGBA")


def resize(image: Image.Image, target: TargetSize, resample=Image.LANCZOS) -> Image.Image:
    if image.size == tuple(target):
        return image.copy()
    logger.debug("resizing %dx%d to %dx%d", *image.size, *target)
    return image.resize(tuple(target), resample)


def render(
    image_data: ImageSource,
    width: Dimension = None,
    height: Dimension = None,
    *,
    preserve_aspect_ratio: bool = False,
    terminal_size: Callable[[], TerminalSize] = get_terminal_size,
    resample=Image.LANCZOS,
) -> RenderedFrame:
    """Fit an image to the terminal and render it as half-block text.

    ``width`` is in columns and ``height`` in text rows; either may also be a
    percentage string such as ``"50%"`` of the available space. With neither
    given the image is scaled to fit the whole terminal.
    """
    if isinstance(image_data, RawImage):
        image = image_data.to_image()
    else:
        image = load_image(image_data)

    request = DimensionRequest(width=width, height=height, preserve_aspect_ratio=preserve_aspect_ratio)
    target = resolve(image.width, image.height, request, terminal_size())
    resized = resize(image, target, resample)
    return RenderedFrame(image=resized, text=quantize(resized))


class HalfBlockRenderer:
    """Renders successive images against the terminal size at call time."""

    def __init__(
        self,
        preserve_aspect_ratio: bool = False,
        terminal_size: Callable[[], TerminalSize] = get_terminal_size,
        resample=Image.LANCZOS,
    ):
        self.preserve_aspect_ratio = preserve_aspect_ratio
        self.terminal_size = terminal_size
        self.resample = resample

    def render(self, image_data: ImageSource, width: Dimension = None, height: Dimension = None) -> RenderedFrame:
        return render(
            image_data,
            width,
            height,
            preserve_aspect_ratio=self.preserve_aspect_ratio,
            terminal_size=self.terminal_size,
            resample=self.resample,
        )
