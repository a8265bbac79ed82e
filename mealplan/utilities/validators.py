"""
Input validation schemas using Pydantic for settings and API requests.
"""
from enum import Enum
from datetime import date, date as _date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mealplan.utilities.config import MAX_DURATION_DAYS
from mealplan.utilities.constants import (
    DEFAULT_CALENDAR_ID,
    DEFAULT_DURATION_DAYS,
    DEFAULT_EVENT_FORMAT,
    DEFAULT_MODEL_NUMBER,
)


class ChildStage(str, Enum):
    """Eating stage of a child, drives how the toddler portion is prepared."""
    WEANING_COMPLETE = "weaning_complete"
    TODDLER = "toddler"
    ADULT_FOOD = "adult_food"


class CookingMode(str, Enum):
    OFFICIAL = "official"
    MANUAL = "manual"


class Child(BaseModel):
    """Schema for one child of the household."""
    model_config = ConfigDict(extra='ignore')

    id: Optional[Union[int, str]] = None
    name: str = ""
    birthday: Optional[date] = None
    stage: ChildStage = ChildStage.WEANING_COMPLETE

    @field_validator('birthday', mode='before')
    @classmethod
    def empty_birthday(cls, v):
        """The settings form stores an empty string when no birthday is known."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()


class HouseholdSettings(BaseModel):
    """Household composition record read from the settings store.

    Stored records use camelCase keys (modelNumber, cookingMode, ...);
    snake_case names are accepted as well.
    """
    model_config = ConfigDict(populate_by_name=True, extra='ignore', protected_namespaces=())

    adults: int = Field(2, ge=0)
    children: List[Child] = Field(default_factory=list)
    dislikes: str = ""
    model_number: str = Field(DEFAULT_MODEL_NUMBER, alias='modelNumber')
    cooking_mode: CookingMode = Field(CookingMode.OFFICIAL, alias='cookingMode')
    calendar_id: str = Field(DEFAULT_CALENDAR_ID, alias='calendarId')
    event_format: str = Field(DEFAULT_EVENT_FORMAT, alias='eventFormat')

    @field_validator('calendar_id', mode='before')
    @classmethod
    def default_calendar(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_CALENDAR_ID
        return v.strip() if isinstance(v, str) else v

    @field_validator('event_format', mode='before')
    @classmethod
    def default_event_format(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_EVENT_FORMAT
        return v

    def to_record(self) -> dict:
        """Return the camelCase mapping written to the settings store."""
        return self.model_dump(mode='json', by_alias=True)


class PlanRequestInput(BaseModel):
    """Schema for a plan generation request."""
    model_config = ConfigDict(populate_by_name=True)

    duration_days: int = Field(DEFAULT_DURATION_DAYS, ge=1, le=MAX_DURATION_DAYS, alias='durationDays')
    free_text: str = Field("", alias='freeText')
    settings: Optional[HouseholdSettings] = None
    start_date: Optional[date] = Field(None, alias='startDate')


class ChatRequestInput(BaseModel):
    """Schema for a raw model passthrough request."""
    message: str = Field(..., min_length=1)


class EventInput(BaseModel):
    """Schema for an already materialized event sent back by a client."""
    date: _date
    summary: str = Field(..., min_length=1)
    description: str = ""


class CalendarRequestInput(BaseModel):
    """Schema for a calendar registration request.

    Either `days` + `startDate` (events are materialized server side) or
    a ready list of `events` must be given.
    """
    model_config = ConfigDict(populate_by_name=True)

    days: List[str] = Field(default_factory=list)
    start_date: Optional[date] = Field(None, alias='startDate')
    events: List[EventInput] = Field(default_factory=list)
    calendar_id: Optional[str] = Field(None, alias='calendarId')

    @field_validator('days')
    @classmethod
    def drop_blank_days(cls, v):
        """Filter out empty day entries."""
        return [d for d in v if d and d.strip()]
