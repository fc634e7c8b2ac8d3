"""Pytest configuration and shared fixtures."""

import json
import os
from pathlib import Path
from typing import Callable, Optional
from unittest.mock import AsyncMock

import pytest
from PIL import Image

from render_grader.models.config import GraderConfig, ViewportConfig
from render_grader.models.raster import Raster


WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


# ============================================================================
# Image Fixtures
# ============================================================================


def solid_raster(width: int, height: int, color: tuple = WHITE) -> Raster:
    """Create a single-color RGBA raster."""
    return Raster.from_image(Image.new("RGBA", (width, height), color))


@pytest.fixture
def png_factory(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a solid-color PNG and returns its path."""

    def _make(name: str = "image.png", size: tuple = (2, 2), color: tuple = WHITE,
              directory: Optional[Path] = None) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", size, color).save(path, format="PNG")
        return path

    return _make


@pytest.fixture
def reference_png(png_factory) -> Path:
    """A 4x4 white reference image."""
    return png_factory("reference.png", size=(4, 4), color=WHITE)


# ============================================================================
# Submission Fixtures
# ============================================================================


@pytest.fixture
def submission_factory(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that lays out one submission directory."""
    root = tmp_path / "submissions"

    def _make(name: str, identity: Optional[dict] = None, user_json: Optional[str] = None,
              with_index: bool = True) -> Path:
        directory = root / name
        directory.mkdir(parents=True, exist_ok=True)
        if with_index:
            (directory / "index.html").write_text("<html><body></body></html>")
        if user_json is None:
            user_json = json.dumps(identity or {"name": name, "email": f"{name}@example.com"})
        (directory / "user.json").write_text(user_json)
        return directory

    return _make


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def grader_config(tmp_path: Path, reference_png: Path) -> GraderConfig:
    """Config pointing at tmp_path/submissions with a 4x4 white reference."""
    root = tmp_path / "submissions"
    root.mkdir(exist_ok=True)
    return GraderConfig(
        base_dir=str(root) + os.sep,
        submissions_root=str(root),
        reference_image=str(reference_png),
        viewport=ViewportConfig(),
    )


# ============================================================================
# Browser Fixtures
# ============================================================================


def make_mock_page(screenshot_color: tuple = WHITE, screenshot_size: tuple = (4, 4)) -> AsyncMock:
    """Mock Playwright page whose screenshot() writes a real PNG to the given path."""
    page = AsyncMock()

    async def _screenshot(path: str, full_page: bool = False):
        Image.new("RGBA", screenshot_size, screenshot_color).save(path, format="PNG")
        return b""

    page.screenshot = AsyncMock(side_effect=_screenshot)
    page.goto = AsyncMock()
    page.context = AsyncMock()
    return page
