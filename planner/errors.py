"""Domain errors raised by the editing core."""

from __future__ import annotations


class PlanError(Exception):
    """Base class for all floor-plan editor errors."""


class MalformedDocument(PlanError):
    """A plan document could not be parsed into the expected structure."""


class DegenerateGeometry(PlanError):
    """A wall was shorter than the minimum allowed length."""

    def __init__(self, length: float, minimum: float) -> None:
        super().__init__(f"wall length {length:.4f} m is not above {minimum} m")
        self.length = length
        self.minimum = minimum


class DuplicateEntity(PlanError):
    """An entity with the same id already exists in its collection."""
