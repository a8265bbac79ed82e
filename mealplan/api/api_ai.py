import os
import json
import logging
from typing import Optional

from openai import OpenAI, OpenAIError
from fastapi import APIRouter, Depends
from pydantic import ValidationError

from mealplan.api.auth import get_credential
from mealplan.api.routes.settings import get_settings_repository
from mealplan.domain.Credential import Credential
from mealplan.domain.errors import ModelInvocationFailed
from mealplan.infra.Settings_Repository import SettingsRepository
from mealplan.logic.calendar.event_materializer import materialize_events
from mealplan.logic.parsing.plan_normalizer import normalize_plan
from mealplan.logic.planning.cycle import generate_plan
from mealplan.utilities.config import OPENAI_MODEL
from mealplan.utilities.constants import SAMPLE_PLAN_JSON
from mealplan.utilities.validators import ChatRequestInput, HouseholdSettings, PlanRequestInput


logger = logging.getLogger(__name__)


# === Helper: Get OpenAI Client ===
def _get_openai_client() -> Optional[OpenAI]:
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        return None
    return OpenAI(api_key=api_key)


# === Plan Generation ===
def generate_text(prompt: str) -> str:
    """Send one instruction to the model and return its raw text."""
    client = _get_openai_client()
    if client is None:
        logger.warning("OPENAI_API_KEY not set; cannot generate a plan.")
        raise ModelInvocationFailed("OPENAI_API_KEY is not set")

    try:
        response = client.responses.create(
            model=OPENAI_MODEL,
            input=prompt,
            text={"format": {"type": "json_object"}},
        )
    except OpenAIError as e:
        logger.exception("OpenAI API error")
        raise ModelInvocationFailed(str(e)) from e

    text = (response.output_text or "").strip()
    if not text:
        raise ModelInvocationFailed("The model returned an empty response")
    return text


def get_generator():
    return generate_text


def _resolve_settings(body: PlanRequestInput, credential: Credential,
                      repo: SettingsRepository) -> HouseholdSettings:
    """Request body settings win, then the stored record, then defaults."""
    if body.settings is not None:
        return body.settings
    if credential.user_key:
        try:
            stored = repo.get(credential.user_key)
        except ValidationError:
            logger.exception("Stored settings for %s are invalid", credential.user_key)
            stored = None
        if stored is not None:
            return stored
    logger.info("No stored settings found; using household defaults")
    return HouseholdSettings()


def _plan_response(plan, body: PlanRequestInput, settings: HouseholdSettings) -> dict:
    result = plan.to_dict()
    if body.start_date is not None:
        events = materialize_events(plan.days, body.start_date,
                                    calendar_id=settings.calendar_id,
                                    title_format=settings.event_format)
        result["events"] = [e.to_dict() for e in events]
    return result


# === FastAPI Endpoints ===
router = APIRouter()


@router.post("/api/chat")
def chat(body: ChatRequestInput, generate=Depends(get_generator)):
    """Raw passthrough: one prompt in, the model text out."""
    return {"text": generate(body.message)}


@router.post("/api/plan")
def create_plan(body: PlanRequestInput,
                credential: Credential = Depends(get_credential),
                repo: SettingsRepository = Depends(get_settings_repository),
                generate=Depends(get_generator)):
    settings = _resolve_settings(body, credential, repo)
    plan = generate_plan(body, settings, generate)
    return _plan_response(plan, body, settings)


@router.post("/api/plan/sample")
def create_sample_plan(body: PlanRequestInput):
    """Same response shape as /api/plan from canned data, without calling the model."""
    settings = body.settings or HouseholdSettings()
    plan = normalize_plan(json.dumps(SAMPLE_PLAN_JSON, ensure_ascii=False), body.duration_days)
    return _plan_response(plan, body, settings)
