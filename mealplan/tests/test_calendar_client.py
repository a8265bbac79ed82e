import json
from datetime import date

import httpx
import pytest

from mealplan.domain.CalendarEvent import EventDescriptor
from mealplan.domain.Credential import Credential
from mealplan.domain.errors import CalendarInsertError
from mealplan.infra.Calendar_Client import GoogleCalendarClient


def _client(handler):
    return GoogleCalendarClient(base_url="https://calendar.test/v3", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_insert_all_day_event_request_shape():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "abc123"})

    event = EventDescriptor(date(2024, 1, 31), "[plan] Curry Rice", "[menu]\nCurry Rice")
    event_id = await _client(handler).insert_all_day_event(event, Credential("tok"))

    assert event_id == "abc123"
    assert seen["method"] == "POST"
    assert seen["path"] == "/v3/calendars/primary/events"
    assert seen["auth"] == "Bearer tok"
    assert seen["body"] == {
        "summary": "[plan] Curry Rice",
        "description": "[menu]\nCurry Rice",
        "start": {"date": "2024-01-31"},
        "end": {"date": "2024-02-01"},
    }


@pytest.mark.asyncio
async def test_insert_rejected_by_api():
    def handler(request: httpx.Request):
        return httpx.Response(401, json={"error": {"message": "Invalid Credentials"}})

    event = EventDescriptor(date(2024, 1, 31), "[plan] Soup")
    with pytest.raises(CalendarInsertError) as ctx:
        await _client(handler).insert_all_day_event(event, Credential("expired"))
    assert ctx.value.status_code == 401
    assert "Invalid Credentials" in str(ctx.value)


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    event = EventDescriptor(date(2024, 1, 31), "[plan] Soup")
    with pytest.raises(CalendarInsertError):
        await _client(handler).insert_all_day_event(event, Credential("tok"))
