"""Screenshot capturer — renders a submission's index.html and saves it as PNG."""

from __future__ import annotations

import logging
from pathlib import Path

from playwright.async_api import Browser
from playwright.async_api import Error as PlaywrightError

from render_grader.errors import NavigationError
from render_grader.imaging.png_io import load_png
from render_grader.models.config import GraderConfig
from render_grader.models.raster import Raster
from render_grader.utils.browser import open_page

logger = logging.getLogger(__name__)


async def capture_screenshot(
    browser: Browser,
    directory: str | Path,
    config: GraderConfig,
) -> Raster | None:
    """Render ``<directory>/index.html`` and return the decoded screenshot.

    An empty directory is skipped and yields None. The screenshot is kept on
    disk as ``<directory>/rendered.png``; the browser itself stays open.
    """
    if not directory:
        return None
    logger.info("Grading: %s", directory)

    directory = Path(directory)
    index_path = directory / config.index_filename
    rendered_path = directory / config.rendered_filename
    if not index_path.is_file():
        raise NavigationError(f"Page not found: {index_path}")
    url = index_path.resolve().as_uri()

    page = await open_page(browser, config.viewport)
    try:
        logger.debug("Navigating to %s", url)
        await page.goto(url, timeout=config.navigation_timeout_ms)
        await page.screenshot(path=str(rendered_path), full_page=config.full_page)
    except PlaywrightError as e:
        raise NavigationError(f"Failed to render {url}: {e}") from e
    finally:
        await page.context.close()

    return await load_png(rendered_path)
