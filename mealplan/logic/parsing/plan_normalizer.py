"""Model output normalizer.

Turns the raw text returned by the model into a NormalizedPlan: at most
`duration_days` non-empty day entries plus the shopping list string.
"""
import json
import logging
import re
from json import JSONDecodeError
from typing import Any, Callable, List, Optional, Tuple

from mealplan.domain.Plan import NormalizedPlan
from mealplan.domain.errors import MalformedOutput

logger = logging.getLogger(__name__)


# Collapse repair: tried in order, the first one giving more than one segment wins.
SPLIT_STRATEGIES: List[Tuple[str, re.Pattern]] = [
    ("day-heading", re.compile(r"\[Day\s*\d+\]", re.IGNORECASE)),
    ("rule", re.compile(r"-{3,}")),
    ("date", re.compile(r"\d{4}[-/.]\d{1,2}[-/.]\d{1,2}")),
]


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove every markdown code fence marker and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?", "", text or "", flags=re.IGNORECASE)
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    """Remove trailing commas before '}' / ']' so json.loads can succeed.

    Text inside JSON strings is left untouched.
    """
    out = []
    in_string = False
    escape = False
    for i, ch in enumerate(text):
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            out.append(ch)
            continue
        if ch == '"':
            in_string = True
        elif ch == ",":
            rest = text[i + 1:].lstrip()
            if rest[:1] in ("}", "]"):
                continue
        out.append(ch)
    return "".join(out)


def _extract_json_by_balancing(text: str) -> Optional[str]:
    """Extract the first JSON object by balancing braces/brackets."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if escape:
            escape = False
            continue
        if in_string:
            if ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            if start is not None:
                in_string = True
            continue
        if ch == "{" and start is None:
            start = i
        if start is None:
            continue
        if ch in "{[":
            stack.append(ch)
        elif ch in "}]":
            if not stack:
                return None
            opening = stack.pop()
            if (opening == "{" and ch != "}") or (opening == "[" and ch != "]"):
                return None
            if not stack:
                return text[start:i + 1]
    return None


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except JSONDecodeError:
        candidate = _extract_json_by_balancing(text)
        if candidate is None:
            raise
        logger.info("Model output had text around the JSON object; using the extracted object")
        return json.loads(_remove_trailing_commas(candidate))


# === Collapse repair ===
def split_collapsed_day(content: str,
                        strategies: Optional[List[Tuple[str, re.Pattern]]] = None) -> Optional[List[str]]:
    """Split a single day entry that holds several days.

    Returns the segments of the first strategy yielding more than one
    non-empty segment, or None when no strategy applies.
    """
    for name, pattern in strategies or SPLIT_STRATEGIES:
        segments = [s.strip() for s in pattern.split(content)]
        segments = [s for s in segments if s]
        if len(segments) > 1:
            logger.info("Collapse repair split one day entry into %d using '%s'", len(segments), name)
            return segments
    return None


def _shopping_list_text(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "\n".join(str(v) for v in value if v)
    return str(value)


def normalize_plan(raw: str, duration_days: int,
                   splitter: Callable[[str], Optional[List[str]]] = split_collapsed_day) -> NormalizedPlan:
    """Parse the model response and enforce the plan shape.

    Raises MalformedOutput (carrying the cleaned text) when no usable day
    content can be recovered. Fewer days than requested is not an error:
    the list is truncated, never padded.
    """
    cleaned = _strip_code_fences(raw)
    logger.debug("Model output (cleaned): %s", cleaned)

    try:
        parsed = _parse_json(cleaned)
    except JSONDecodeError as e:
        logger.warning("Model output is not valid JSON: %s", e)
        raise MalformedOutput("response is not valid JSON", raw=cleaned) from e

    if not isinstance(parsed, dict):
        raise MalformedOutput("response is not a JSON object", raw=cleaned)

    days = parsed.get("days")
    if not isinstance(days, list):
        raise MalformedOutput("'days' is missing or not an array", raw=cleaned)

    if len(days) == 1 and duration_days > 1 and isinstance(days[0], str):
        split = splitter(days[0])
        if split:
            days = split

    filtered = [d for d in days if isinstance(d, str) and d.strip()]
    if not filtered:
        raise MalformedOutput("'days' contains no usable entries", raw=cleaned)

    plan = NormalizedPlan(
        days=filtered[:duration_days],
        shopping_list=_shopping_list_text(parsed.get("shoppingList")),
        requested_days=duration_days,
        raw=cleaned,
    )
    if plan.shortfall:
        logger.warning("Model returned %d of %d requested days", len(plan.days), duration_days)
    return plan


__all__ = ['normalize_plan', 'split_collapsed_day', 'SPLIT_STRATEGIES']
