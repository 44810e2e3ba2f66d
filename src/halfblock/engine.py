from __future__ import annotations

from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class RawImage:
    """Undecoded RGBA pixels, row-major, 4 bytes per pixel."""

    width: int
    height: int
    data: bytes

    def to_image(self) -> Image.Image:
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(f"Expected {expected} bytes of RGBA data for {self.width}x{self.height}, got {len(self.data)}")
        return Image.frombytes("RGBA", (self.width, self.height), bytes(self.data))


@dataclass
class RenderedFrame:
    image: Image.Image  # resized to the frame's pixel size
    text: str  # one newline-terminated line per two pixel rows
