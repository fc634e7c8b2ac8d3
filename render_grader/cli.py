"""CLI entry point for the render grader."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from render_grader.models.config import GraderConfig
from render_grader.orchestrator import Orchestrator
from render_grader.reporter.json_report import generate_json_report, render_results

# stdout is reserved for the results mapping
console = Console(stderr=True)
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@click.command()
@click.option("--base", "-b", required=True, help="Prefix joined to each submission name; end it with a separator when it is a directory")
@click.option("--reference", "-r", required=True, help="The reference image to compare the rendered page to")
@click.option("--directories", "-d", required=True, help="Directory whose entries name the submissions")
@click.option("--config", "-c", default=None, help="Optional JSON settings file")
@click.option("--threshold", "-t", type=float, default=None, help="Per-pixel color threshold (0-1)")
@click.option("--output", "-o", default=None, help="Also write the results mapping to this file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(
    base: str,
    reference: str,
    directories: str,
    config: str | None,
    threshold: float | None,
    output: str | None,
    verbose: bool,
) -> None:
    """Render submitted pages and score them against a reference image."""
    setup_logging(verbose)
    overrides = {
        "base_dir": base,
        "submissions_root": directories,
        "reference_image": reference,
        "threshold": threshold,
    }
    try:
        if config:
            cfg = GraderConfig.load(config, **overrides)
        else:
            cfg = GraderConfig(**{k: v for k, v in overrides.items() if v is not None})
        results = Orchestrator(cfg).run()
        if output:
            generate_json_report(results, Path(output))
            logger.info("JSON report: %s", output)
    except Exception as e:
        logger.exception("Grading failed: %s", e)
        sys.exit(1)

    click.echo(render_results(results))


if __name__ == "__main__":
    cli()
