"""Google Calendar REST client used as the event sink."""
import logging
from datetime import timedelta
from typing import Optional
from urllib.parse import quote

import httpx

from mealplan.domain.CalendarEvent import EventDescriptor
from mealplan.domain.Credential import Credential
from mealplan.domain.errors import CalendarInsertError
from mealplan.utilities.config import CALENDAR_API_BASE, CALENDAR_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class GoogleCalendarClient:
    """Inserts all-day events through the Calendar v3 `events.insert` endpoint."""

    def __init__(self, base_url: str = CALENDAR_API_BASE, timeout: float = CALENDAR_TIMEOUT_SECONDS,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport

    def _events_url(self, calendar_id: str) -> str:
        return f"{self.base_url}/calendars/{quote(calendar_id, safe='')}/events"

    @staticmethod
    def event_body(event: EventDescriptor) -> dict:
        # all-day events: end date is exclusive
        return {
            "summary": event.title,
            "description": event.description,
            "start": {"date": event.date.isoformat()},
            "end": {"date": (event.date + timedelta(days=1)).isoformat()},
        }

    async def insert_all_day_event(self, event: EventDescriptor, credential: Credential) -> str:
        """Insert one event and return its id."""
        headers = {"Authorization": f"Bearer {credential.access_token}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self._events_url(event.calendar_id),
                                             json=self.event_body(event), headers=headers)
        except httpx.HTTPError as e:
            raise CalendarInsertError(f"Calendar request failed: {e}") from e

        if response.status_code not in (200, 201):
            raise CalendarInsertError(
                f"Calendar API returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        data = response.json()
        logger.info("Inserted calendar event %s on %s", data.get("id"), event.date.isoformat())
        return str(data.get("id", ""))


__all__ = ['GoogleCalendarClient']
