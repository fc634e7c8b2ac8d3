"""Submission identity and grading result data structures."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Identity(BaseModel):
    name: str
    email: str


class SubmissionRecord(BaseModel):
    directory_path: str
    identity: Identity


class ResultEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    # None when the capture step was skipped for an empty path
    diff_percentage: Optional[float] = Field(default=None, alias="diffPercentage")

    def to_output(self) -> dict:
        """Serialized form; a skipped score leaves diffPercentage out entirely."""
        return self.model_dump(by_alias=True, exclude_none=True)


ResultsMapping = dict[str, ResultEntry]


def results_to_output(results: ResultsMapping) -> dict[str, dict]:
    return {email: entry.to_output() for email, entry in results.items()}
