"""Error taxonomy for the scoring and decision core.

``ValidationError`` subclasses describe bad input and map to HTTP 400.
``DefensiveInvariantError`` subclasses describe a broken configuration or a
programming defect and map to HTTP 500. ``CollaboratorFailure`` is raised by
outbound adapters (email, spreadsheet) and is only ever caught and logged at
the background dispatch site.
"""

from __future__ import annotations


class ScoringError(Exception):
    """Base class for every error raised by the scoring core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ScoringError):
    """Input failed a documented precondition."""


class IncompleteSubmission(ValidationError):
    """Too few valid responses to score a submission."""

    def __init__(self, message: str, *, valid_count: int, required_count: float):
        super().__init__(message)
        self.valid_count = valid_count
        self.required_count = required_count


class DefensiveInvariantError(ScoringError):
    """An invariant that correct configuration guarantees was violated."""


class UnknownCategory(DefensiveInvariantError):
    """A ranking referenced a category missing from a reference table."""

    def __init__(self, category: str, table: str):
        super().__init__(f"Category '{category}' is not present in the {table} table")
        self.category = category
        self.table = table


class CollaboratorFailure(ScoringError):
    """An outbound notification or persistence call failed."""

    def __init__(self, collaborator: str, message: str):
        super().__init__(f"{collaborator}: {message}")
        self.collaborator = collaborator
