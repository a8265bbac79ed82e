"""Day entries -> all-day calendar event descriptors.

Provides materialize_events(days, start_date, calendar_id=None, title_format=None).
"""
import re
from datetime import date, timedelta
from typing import List, Optional, Sequence, Union

from mealplan.domain.CalendarEvent import EventDescriptor
from mealplan.utilities.constants import (
    DEFAULT_CALENDAR_ID,
    DEFAULT_EVENT_FORMAT,
    MENU_NAME_PLACEHOLDER,
    UNTITLED_MENU,
)

MENU_PATTERN = re.compile(r"\[menu(?: name)?\][ \t]*\n?[ \t]*(\S[^\n]*)", re.IGNORECASE)


def extract_menu_name(day_text: str) -> Optional[str]:
    """Return the line following the menu heading, or None."""
    match = MENU_PATTERN.search(day_text or "")
    if not match:
        return None
    return match.group(1).strip() or None


def format_title(day_text: str, title_format: Optional[str] = None) -> str:
    fmt = title_format or DEFAULT_EVENT_FORMAT
    menu_name = extract_menu_name(day_text) or UNTITLED_MENU
    if MENU_NAME_PLACEHOLDER not in fmt:
        return f"{fmt} {menu_name}".strip()
    return fmt.replace(MENU_NAME_PLACEHOLDER, menu_name)


def materialize_events(days: Sequence[str], start_date: Union[date, str],
                       calendar_id: Optional[str] = None,
                       title_format: Optional[str] = None) -> List[EventDescriptor]:
    """Assign day i to start_date + i days and build one event per day."""
    if isinstance(start_date, str):
        start_date = date.fromisoformat(start_date)
    target_calendar = (calendar_id or "").strip() or DEFAULT_CALENDAR_ID

    events = []
    for index, text in enumerate(days):
        events.append(EventDescriptor(
            date=start_date + timedelta(days=index),
            title=format_title(text, title_format),
            description=text,
            calendar_id=target_calendar,
        ))
    return events


__all__ = ['materialize_events', 'extract_menu_name', 'format_title']
