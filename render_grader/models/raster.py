"""In-memory RGBA raster shared by the loader, capturer and scorer."""

from __future__ import annotations

from PIL import Image
from pydantic import BaseModel, model_validator


class Raster(BaseModel):
    width: int
    height: int
    pixels: bytes  # RGBA, row-major

    @model_validator(mode="after")
    def check_buffer_size(self) -> "Raster":
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(
                f"pixel buffer holds {len(self.pixels)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )
        return self

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def from_image(cls, image: Image.Image) -> "Raster":
        rgba = image.convert("RGBA")
        return cls(width=rgba.width, height=rgba.height, pixels=rgba.tobytes())

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", self.size, self.pixels)
