"""Error taxonomy for the generation and submission cycles.

Every error derives from PlanningError so the web layer can turn any of them
into a single human readable message.
"""
from typing import List, Optional


class PlanningError(Exception):
    """Base class for errors surfaced to the user at the end of a cycle."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class MissingCredential(PlanningError):
    """A calendar or settings call was attempted without an authenticated identity."""
    status_code = 401

    def __init__(self, message: str = "Google sign-in is required"):
        super().__init__(message)


class ModelInvocationFailed(PlanningError):
    """The generation call itself failed (network, quota, configuration)."""
    status_code = 502

    def __init__(self, details: str):
        super().__init__("Failed to generate the meal plan")
        self.details = details

    def to_dict(self) -> dict:
        return {"error": self.message, "details": self.details}


class MalformedOutput(PlanningError):
    """The model response could not be turned into usable day entries.

    `raw` keeps the cleaned model text so the caller can show it as-is.
    """
    status_code = 422

    def __init__(self, reason: str, raw: str = ""):
        super().__init__("Could not read the model response: " + reason)
        self.reason = reason
        self.raw = raw

    def to_dict(self) -> dict:
        return {"error": self.message, "raw": self.raw}


class CalendarInsertError(Exception):
    """A single all-day event insertion was rejected by the calendar API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SubmissionFailed(PlanningError):
    """One calendar insertion failed after zero or more succeeded.

    Earlier insertions are not rolled back; `inserted_count` and `event_ids`
    describe what already landed in the calendar.
    """
    status_code = 502

    def __init__(self, inserted_count: int, cause: Exception, event_ids: Optional[List[str]] = None):
        super().__init__("Failed to register the plan in the calendar")
        self.inserted_count = inserted_count
        self.event_ids = list(event_ids or [])
        self.cause = cause

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "details": str(self.cause),
            "insertedCount": self.inserted_count,
            "eventIds": self.event_ids,
        }


__all__ = [
    'PlanningError', 'MissingCredential', 'ModelInvocationFailed',
    'MalformedOutput', 'CalendarInsertError', 'SubmissionFailed',
]
