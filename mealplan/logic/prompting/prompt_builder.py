"""Generation prompt builder.

Provides build_prompt(request, settings, today=None) plus the household age
helpers used both in the prompt and in the settings summary.
"""
import json
from datetime import date
from typing import Iterable, Optional

from mealplan.utilities.constants import PROMPT_TEMPLATE, PROMPT_OUTPUT_EXAMPLE
from mealplan.utilities.validators import Child, HouseholdSettings, PlanRequestInput

UNKNOWN_AGE = "? yrs"
NO_CHILDREN = "not set"


def compute_age(birthday: date, today: Optional[date] = None) -> int:
    """Completed years between birthday and today."""
    today = today or date.today()
    age = today.year - birthday.year
    if (today.month, today.day) < (birthday.month, birthday.day):
        age -= 1
    return age


def format_children_ages(children: Iterable[Child], today: Optional[date] = None) -> str:
    """Render e.g. '3 yrs / ? yrs'; 'not set' when there are no children."""
    parts = []
    for child in children or []:
        if child.birthday is None:
            parts.append(UNKNOWN_AGE)
        else:
            parts.append(f"{compute_age(child.birthday, today)} yrs")
    return " / ".join(parts) if parts else NO_CHILDREN


def format_settings_info(settings: HouseholdSettings, today: Optional[date] = None) -> str:
    lines = [
        f"- Automatic cooker model: {settings.model_number or 'not specified'}",
        f"- Cooking mode: {settings.cooking_mode.value}",
        f"- Adults: {settings.adults}",
        f"- Children's ages: {format_children_ages(settings.children, today)}",
    ]
    stages = [c.stage.value for c in settings.children]
    if stages:
        lines.append(f"- Children's eating stages: {', '.join(stages)}")
    if settings.dislikes.strip():
        lines.append(f"- Dislikes / avoid: {settings.dislikes.strip()}")
    lines.append(f"- Other details: {json.dumps(settings.to_record(), ensure_ascii=False)}")
    return "\n".join(lines)


def build_prompt(request: PlanRequestInput, settings: HouseholdSettings, today: Optional[date] = None) -> str:
    """Format the instruction text sent to the model.

    The text pins the output to a JSON object with exactly `days`
    (request.duration_days strings) and `shoppingList`.
    """
    return PROMPT_TEMPLATE.format(
        duration=request.duration_days,
        settings_info=format_settings_info(settings, today),
        free_text=request.free_text.strip() or "none",
        example=PROMPT_OUTPUT_EXAMPLE,
    )


__all__ = ['build_prompt', 'compute_age', 'format_children_ages', 'format_settings_info']
