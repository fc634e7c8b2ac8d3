"""Error types raised while grading a batch of submissions."""

from __future__ import annotations


class GraderError(Exception):
    """Base class for all grading failures."""


class DecodeError(GraderError):
    """A PNG file is missing, unreadable, or not a valid PNG."""


class NavigationError(GraderError):
    """A submission page could not be loaded, rendered or captured."""


class ParseError(GraderError):
    """A submission's user.json is malformed or missing required fields."""


class FilesystemError(GraderError):
    """A required directory or file does not exist or cannot be read."""


class DimensionMismatchError(GraderError):
    """Reference and rendered rasters have different sizes."""

    def __init__(self, reference_size: tuple[int, int], rendered_size: tuple[int, int]):
        self.reference_size = reference_size
        self.rendered_size = rendered_size
        super().__init__(
            f"Image sizes do not match: reference {reference_size[0]}x{reference_size[1]}, "
            f"rendered {rendered_size[0]}x{rendered_size[1]}"
        )
