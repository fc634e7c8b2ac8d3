"""Batch orchestrator — grades every submission directory in one browser session."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from pathlib import Path

from playwright.async_api import Browser, async_playwright

from render_grader.capture.screenshot import capture_screenshot
from render_grader.errors import FilesystemError
from render_grader.grading.identity import read_identity
from render_grader.imaging.png_io import load_png
from render_grader.models.config import GraderConfig
from render_grader.models.raster import Raster
from render_grader.models.submission import ResultEntry, ResultsMapping, SubmissionRecord
from render_grader.scoring.diff_scorer import score
from render_grader.utils.browser import launch_browser

logger = logging.getLogger(__name__)


class Orchestrator:
    """Runs the capture → score → identify loop over a batch of submissions.

    The batch is all-or-nothing: the first error from any submission aborts
    the run and propagates to the caller with no partial results.
    """

    def __init__(self, config: GraderConfig):
        self.config = config

    def run(self) -> ResultsMapping:
        """Grade the whole batch and return results keyed by email."""
        return asyncio.run(self._run())

    async def _run(self) -> ResultsMapping:
        start = time.time()
        logger.debug(
            "Params: base=%s, directories=%s, reference=%s",
            self.config.base_dir, self.config.submissions_root, self.config.reference_image,
        )

        reference = await load_png(self.config.reference_image)
        logger.debug("Reference image %dx%d", reference.width, reference.height)
        entries = self._list_submissions()
        results: ResultsMapping = {}

        async with async_playwright() as p:
            browser = await launch_browser(p, headless=self.config.headless)
            for entry in entries:
                directory = self.config.submission_path(entry)
                record, diff_percentage = await self._grade_submission(browser, reference, directory)
                email = record.identity.email
                if email in results:
                    logger.warning("Duplicate email %s in %s, replacing earlier result", email, directory)
                results[email] = ResultEntry(name=record.identity.name, diff_percentage=diff_percentage)
            await browser.close()

        logger.info("Graded %d submissions in %.1fs", len(entries), time.time() - start)
        return results

    def _list_submissions(self) -> list[str]:
        root = Path(self.config.submissions_root)
        if not root.is_dir():
            raise FilesystemError(f"Submissions directory not found: {root}")
        entries = sorted(os.listdir(root))
        logger.debug("Found %d submission entries in %s", len(entries), root)
        return entries

    async def _grade_submission(
        self, browser: Browser, reference: Raster, directory: str,
    ) -> tuple[SubmissionRecord, float | None]:
        """Capture, score and identify one submission directory."""
        diff_percentage = None
        rendered = await capture_screenshot(browser, directory, self.config)
        if rendered is not None:
            diff_percentage = await score(
                reference,
                rendered,
                directory,
                threshold=self.config.threshold,
                size_mismatch=self.config.size_mismatch,
                diff_filename=self.config.diff_filename,
            )
        identity = read_identity(directory, self.config.user_filename)
        return SubmissionRecord(directory_path=directory, identity=identity), diff_percentage
