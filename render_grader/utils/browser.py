"""Browser utilities — launches Chromium tuned for repeatable page renders."""

from __future__ import annotations

from playwright.async_api import Browser, Page, Playwright

from render_grader.models.config import ViewportConfig

# Flags that keep rasterization stable between runs and machines
_RENDER_ARGS = [
    "--hide-scrollbars",
    "--font-render-hinting=none",
    "--force-color-profile=srgb",
    "--allow-file-access-from-files",
]


async def launch_browser(playwright: Playwright, headless: bool = True) -> Browser:
    """Launch Chromium for rendering local submission pages."""
    return await playwright.chromium.launch(headless=headless, args=_RENDER_ARGS)


async def open_page(browser: Browser, viewport: ViewportConfig) -> Page:
    """Open a page in its own context with a fixed viewport.

    Closing the returned page's context releases everything the page created.
    """
    context = await browser.new_context(
        viewport={"width": viewport.width, "height": viewport.height},
        device_scale_factor=1,
    )
    return await context.new_page()
