import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mealplan.api.auth import get_credential
from mealplan.api.routes.settings import get_stored_settings
from mealplan.domain.CalendarEvent import EventDescriptor
from mealplan.domain.Credential import Credential
from mealplan.domain.errors import MissingCredential
from mealplan.infra.Calendar_Client import GoogleCalendarClient
from mealplan.logic.calendar.submitter import submit_events
from mealplan.logic.planning.cycle import register_plan
from mealplan.utilities.constants import DEFAULT_CALENDAR_ID
from mealplan.utilities.validators import CalendarRequestInput, HouseholdSettings

router = APIRouter()
logger = logging.getLogger(__name__)


def get_calendar_client() -> GoogleCalendarClient:
    return GoogleCalendarClient()


@router.post("/api/calendar")
async def register_to_calendar(body: CalendarRequestInput,
                               credential: Credential = Depends(get_credential),
                               settings: HouseholdSettings = Depends(get_stored_settings),
                               client: GoogleCalendarClient = Depends(get_calendar_client)):
    """Insert the plan as all-day events, one by one.

    Stops at the first failure; events inserted before it are kept and
    reported in the error body (insertedCount / eventIds).
    """
    if not credential.has_token:
        raise MissingCredential()

    if body.events:
        calendar_id = body.calendar_id or settings.calendar_id or DEFAULT_CALENDAR_ID
        events = [EventDescriptor(e.date, e.summary, e.description, calendar_id) for e in body.events]
        result = await submit_events(events, credential, client.insert_all_day_event)
    elif body.days and body.start_date is not None:
        result = await register_plan(body.days, body.start_date, settings, credential,
                                     client.insert_all_day_event, calendar_id=body.calendar_id)
    else:
        return JSONResponse(status_code=400,
                            content={"error": "Either 'events' or 'days' with 'startDate' is required"})

    logger.info("Calendar registration done: %d events", result.inserted_count)
    return result.to_dict()
