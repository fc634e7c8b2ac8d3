"""JSON report output."""

from __future__ import annotations

import json
from pathlib import Path

from render_grader.models.submission import ResultsMapping, results_to_output


def render_results(results: ResultsMapping) -> str:
    """Single-line JSON mapping of email to name and diffPercentage."""
    return json.dumps(results_to_output(results))


def generate_json_report(results: ResultsMapping, output_path: Path) -> None:
    """Write the results mapping to a file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(results_to_output(results), f, indent=2)
