"""Configuration models for the grader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ViewportConfig(BaseModel):
    width: int = 1366
    height: int = 768


class GraderConfig(BaseModel):
    # Inputs
    base_dir: str
    submissions_root: str
    reference_image: str

    # Rendering
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    full_page: bool = True
    navigation_timeout_ms: int = 30000
    headless: bool = True

    # Scoring
    threshold: float = 0.1  # pixelmatch perceptual threshold, 0 is strictest
    size_mismatch: Literal["error", "crop"] = "error"

    # Per-submission files
    index_filename: str = "index.html"
    user_filename: str = "user.json"
    rendered_filename: str = "rendered.png"
    diff_filename: str = "diff.png"

    @field_validator("threshold")
    @classmethod
    def check_threshold(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("threshold must be between 0 and 1")
        return v

    def submission_path(self, entry: str) -> str:
        """Prefix a submission entry name with the base, as ``<base><entry>``.

        The base is a plain prefix: pass a trailing separator when it names a
        directory.
        """
        if not entry:
            return ""
        return self.base_dir + entry

    @classmethod
    def load(cls, path: str | Path, **overrides) -> "GraderConfig":
        """Load config from a JSON file, with non-None overrides applied on top."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
