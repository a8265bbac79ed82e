"""Generation and submission cycles.

generate_plan: settings + request -> prompt -> model -> NormalizedPlan
register_plan: day entries + start date -> events -> calendar

The model and calendar are passed in as callables so the cycles stay free of
web/client concerns. Nothing is retried.
"""
import logging
from datetime import date
from typing import Callable, Optional, Sequence, Union

from mealplan.domain.CalendarEvent import SubmissionResult
from mealplan.domain.Credential import Credential
from mealplan.domain.Plan import NormalizedPlan
from mealplan.domain.errors import ModelInvocationFailed, PlanningError
from mealplan.logic.calendar.event_materializer import materialize_events
from mealplan.logic.calendar.submitter import InsertEvent, submit_events
from mealplan.logic.parsing.plan_normalizer import normalize_plan
from mealplan.logic.prompting.prompt_builder import build_prompt
from mealplan.utilities.validators import HouseholdSettings, PlanRequestInput

logger = logging.getLogger(__name__)


def generate_plan(request: PlanRequestInput, settings: HouseholdSettings,
                  generate: Callable[[str], str], today: Optional[date] = None) -> NormalizedPlan:
    prompt = build_prompt(request, settings, today)
    logger.info("Requesting a %d-day plan (prompt: %d chars)", request.duration_days, len(prompt))
    try:
        raw = generate(prompt)
    except PlanningError:
        raise
    except Exception as e:
        logger.exception("Model invocation failed")
        raise ModelInvocationFailed(str(e) or e.__class__.__name__) from e

    plan = normalize_plan(raw, request.duration_days)
    logger.info("Plan normalized: %d/%d days, shopping list %s",
                len(plan.days), plan.requested_days, "present" if plan.shopping_list else "empty")
    return plan


async def register_plan(days: Sequence[str], start_date: Union[date, str], settings: HouseholdSettings,
                        credential: Optional[Credential], insert_event: InsertEvent,
                        calendar_id: Optional[str] = None) -> SubmissionResult:
    """Materialize the day entries and insert them in order (fail-fast)."""
    events = materialize_events(
        days, start_date,
        calendar_id=calendar_id or settings.calendar_id,
        title_format=settings.event_format,
    )
    return await submit_events(events, credential, insert_event)


__all__ = ['generate_plan', 'register_plan']
