"""Reads the submitter identity stored next to each submission."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from render_grader.errors import FilesystemError, ParseError
from render_grader.models.submission import Identity

logger = logging.getLogger(__name__)


def read_identity(directory: str | Path, filename: str = "user.json") -> Identity:
    """Load ``{name, email}`` from a submission's user.json."""
    path = Path(directory) / filename
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise FilesystemError(f"Missing identity file: {path}") from e
    except json.JSONDecodeError as e:
        raise ParseError(f"Malformed JSON in {path}: {e}") from e
    except OSError as e:
        raise FilesystemError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    try:
        identity = Identity(**data)
    except ValidationError as e:
        raise ParseError(f"Invalid identity in {path}: {e}") from e
    logger.debug("Identity for %s: %s <%s>", directory, identity.name, identity.email)
    return identity
