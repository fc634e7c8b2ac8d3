"""Diff scorer — pixel comparison of a rendered page against the reference image."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image
from pixelmatch.contrib.PIL import pixelmatch

from render_grader.errors import DimensionMismatchError
from render_grader.imaging.png_io import save_png
from render_grader.models.raster import Raster

logger = logging.getLogger(__name__)

DIFF_COLOR = (255, 0, 0)
AA_COLOR = (255, 255, 0)
# Opacity of the reference drawn underneath the mismatch markers
FADE_ALPHA = 0.1


def _match(reference: Image.Image, rendered: Image.Image, threshold: float) -> tuple[int, Image.Image]:
    diff = Image.new("RGBA", reference.size)
    mismatched = pixelmatch(
        reference,
        rendered,
        diff,
        threshold=threshold,
        alpha=FADE_ALPHA,
        aa_color=AA_COLOR,
        diff_color=DIFF_COLOR,
    )
    return mismatched, diff


def compare_rasters(
    reference: Raster,
    rendered: Raster,
    threshold: float = 0.1,
    size_mismatch: str = "error",
) -> tuple[int, Image.Image]:
    """Count mismatched pixels and build a diff image sized to the reference.

    Pixels are compared by perceptual YIQ distance with alpha blended onto
    white; anti-aliased pixels are drawn yellow and not counted. With
    ``size_mismatch="crop"`` rasters of different sizes are compared over
    their common top-left region and the rest of the reference is drawn faded.
    """
    ref_img = reference.to_image()
    ren_img = rendered.to_image()

    if reference.size == rendered.size:
        return _match(ref_img, ren_img, threshold)

    if size_mismatch != "crop":
        raise DimensionMismatchError(reference.size, rendered.size)
    width = min(reference.width, rendered.width)
    height = min(reference.height, rendered.height)
    logger.warning(
        "Size mismatch (reference %dx%d, rendered %dx%d), comparing %dx%d region",
        reference.width, reference.height, rendered.width, rendered.height, width, height,
    )
    region = (0, 0, width, height)
    mismatched, region_diff = _match(ref_img.crop(region), ren_img.crop(region), threshold)
    # identical inputs only draw the faded background
    _, diff = _match(ref_img, ref_img, threshold)
    diff.paste(region_diff, region)
    return mismatched, diff


def mismatch_percentage(mismatched: int, reference: Raster) -> float:
    total = reference.width * reference.height
    if total == 0:
        return 0.0
    return mismatched / total * 100


async def score(
    reference: Raster,
    rendered: Raster,
    output_dir: str | Path,
    threshold: float = 0.1,
    size_mismatch: str = "error",
    diff_filename: str = "diff.png",
) -> float:
    """Score a rendered raster against the reference and write the diff image.

    Returns the percentage of reference pixels that mismatch, in [0, 100].
    The diff PNG is fully written before this returns.
    """
    mismatched, diff = compare_rasters(reference, rendered, threshold, size_mismatch)
    logger.info("Mismatched pixels: %d", mismatched)
    await save_png(diff, Path(output_dir) / diff_filename)
    return mismatch_percentage(mismatched, reference)
