"""Calendar domain entities: all-day event descriptor and submission result."""
from datetime import date
from typing import List, Optional

from mealplan.utilities.constants import DEFAULT_CALENDAR_ID


class EventDescriptor:
    def __init__(self, date: date, title: str, description: str = "",
                 calendar_id: str = DEFAULT_CALENDAR_ID):
        self.date = date
        self.title = title
        self.description = description
        self.calendar_id = calendar_id or DEFAULT_CALENDAR_ID

    def to_dict(self):
        return {
            "date": self.date.isoformat(),
            "summary": self.title,
            "description": self.description,
            "calendarId": self.calendar_id,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, EventDescriptor):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.date.isoformat()} - {self.title} ({self.calendar_id})"

    __repr__ = __str__


class SubmissionResult:
    def __init__(self, inserted_count: int = 0, event_ids: Optional[List[str]] = None):
        self.inserted_count = inserted_count
        self.event_ids = event_ids[:] if event_ids else []

    def to_dict(self):
        return {"success": True, "count": self.inserted_count, "eventIds": self.event_ids}

    def __str__(self) -> str:
        return f"SubmissionResult - inserted: {self.inserted_count}"

    __repr__ = __str__
