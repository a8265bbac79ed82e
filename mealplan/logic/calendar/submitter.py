"""Sequential, fail-fast submission of event descriptors to a calendar."""
import logging
from typing import Awaitable, Callable, Optional, Sequence

from mealplan.domain.CalendarEvent import EventDescriptor, SubmissionResult
from mealplan.domain.Credential import Credential
from mealplan.domain.errors import MissingCredential, SubmissionFailed

logger = logging.getLogger(__name__)

InsertEvent = Callable[[EventDescriptor, Credential], Awaitable[str]]


async def submit_events(events: Sequence[EventDescriptor], credential: Optional[Credential],
                        insert_event: InsertEvent) -> SubmissionResult:
    """Insert events one at a time, in order.

    The first failing insertion raises SubmissionFailed and the remaining
    events are not submitted. Events inserted before the failure stay in the
    calendar; the error reports how many (and which ids) landed.
    """
    if credential is None or not credential.has_token:
        raise MissingCredential()

    event_ids = []
    for event in events:
        try:
            event_id = await insert_event(event, credential)
        except Exception as e:
            logger.error("Calendar insertion failed for %s after %d inserted: %s", event, len(event_ids), e)
            raise SubmissionFailed(len(event_ids), e, event_ids) from e
        event_ids.append(event_id)

    logger.info("Inserted %d calendar events", len(event_ids))
    return SubmissionResult(len(event_ids), event_ids)


__all__ = ['submit_events', 'InsertEvent']
