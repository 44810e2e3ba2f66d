import numpy as np
from PIL import Image

from halfblock.styling import LOWER_HALF_BLOCK, paint, plain


def quantize(image: Image.Image) -> str:
    """Render an image as half-block cells, two pixel rows per text line.

    The top pixel of each pair becomes the cell background and the bottom
    pixel the foreground of a lower half block. A fully transparent top pixel
    gives an unstyled space. An odd final row has no partner and is dropped.
    """
    pixels = np.asarray(image.convert("RGBA"))
    height, width = pixels.shape[:2]

    lines = []
    for y in range(0, height - 1, 2):
        cells = []
        for x in range(width):
            r, g, b, a = (int(v) for v in pixels[y, x])
            if a == 0:
                cells.append(plain(" "))
                continue
            r2, g2, b2 = (int(v) for v in pixels[y + 1, x, :3])
            cells.append(paint(LOWER_HALF_BLOCK, background=(r, g, b), foreground=(r2, g2, b2)))
        cells.append("\n")
        lines.append("".join(cells))
    return "".join(lines)
