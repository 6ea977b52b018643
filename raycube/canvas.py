"""In-memory RGB images: the frame, the minimap and the textures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from .constants import BLACK
from .scene import Color, SceneError

_COLOR_MASK = 0xFFFFFF


@dataclass
class Canvas:
    """A width by height grid of colours packed as 0xRRGGBB, stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [BLACK] * size
        elif len(self.pixels) != size:
            raise ValueError(
                f"expected {size} pixels for a {self.width}x{self.height} image, "
                f"got {len(self.pixels)}"
            )

    @classmethod
    def from_image(cls, image: Image.Image) -> "Canvas":
        """Copy a Pillow image into a canvas."""
        rgb = image.convert("RGB")
        width, height = rgb.size
        data = rgb.tobytes()
        pixels = [int.from_bytes(data[start : start + 3], "big") for start in range(0, len(data), 3)]
        return cls(width, height, pixels)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set one pixel; points outside the image are ignored."""
        col = int(x)
        row = int(y)
        if not self._inside(col, row):
            return
        self.pixels[row * self.width + col] = color & _COLOR_MASK

    def get_pixel(self, x: float, y: float) -> int:
        """The colour at ``(x, y)``; raises IndexError outside the image."""
        col = int(x)
        row = int(y)
        if not self._inside(col, row):
            raise IndexError(f"pixel ({col}, {row}) outside {self.width}x{self.height} image")
        return self.pixels[row * self.width + col]

    def clear(self) -> None:
        """Paint the whole image black."""
        self.pixels = [BLACK] * (self.width * self.height)

    def fill_background(self, floor: Color, ceiling: Color) -> None:
        """Ceiling colour on the upper half, floor colour on the rest."""
        upper = self.width * (self.height // 2)
        lower = self.width * self.height - upper
        self.pixels = [ceiling.rgb] * upper + [floor.rgb] * lower


def load_texture(path: str | Path) -> Canvas:
    """Load an image file as a texture."""
    try:
        with Image.open(path) as image:
            image.load()
            return Canvas.from_image(image)
    except (OSError, ValueError) as exc:
        raise SceneError("Failed XPM to image") from exc