"""PNG decode/encode adapters over Pillow."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from PIL import Image

from render_grader.errors import DecodeError
from render_grader.models.raster import Raster

logger = logging.getLogger(__name__)


def _decode(path: Path) -> Raster:
    try:
        with Image.open(path) as im:
            if im.format != "PNG":
                raise DecodeError(f"Not a PNG file: {path} (format={im.format})")
            im.load()
            return Raster.from_image(im)
    except DecodeError:
        raise
    except (OSError, ValueError, SyntaxError) as e:
        raise DecodeError(f"Failed to decode PNG {path}: {e}") from e


async def load_png(path: str | Path) -> Raster:
    """Decode a PNG file into an RGBA raster."""
    path = Path(path)
    logger.debug("Decoding PNG %s", path)
    raster = await asyncio.to_thread(_decode, path)
    logger.debug("Decoded %s (%dx%d)", path, raster.width, raster.height)
    return raster


def _encode(image: Image.Image, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")


async def save_png(image: Image.Image | Raster, path: str | Path) -> Path:
    """Encode a raster or Pillow image to a PNG file and return its path."""
    path = Path(path)
    if isinstance(image, Raster):
        image = image.to_image()
    await asyncio.to_thread(_encode, image, path)
    logger.debug("Wrote %s", path)
    return path
