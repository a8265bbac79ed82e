import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mealplan.api.auth import get_credential, require_user
from mealplan.domain.Credential import Credential
from mealplan.infra.Settings_Repository import SettingsRepository
from mealplan.utilities.validators import HouseholdSettings

router = APIRouter()
logger = logging.getLogger(__name__)


def get_settings_repository() -> SettingsRepository:
    return SettingsRepository()


@router.get("/api/settings")
def read_settings(credential: Credential = Depends(get_credential),
                  repo: SettingsRepository = Depends(get_settings_repository)):
    user_key = require_user(credential)
    try:
        settings = repo.get(user_key)
    except ValidationError:
        logger.exception("Stored settings for %s are invalid", user_key)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch settings"})
    return settings.to_record() if settings is not None else {}


@router.post("/api/settings")
def save_settings(body: HouseholdSettings,
                  credential: Credential = Depends(get_credential),
                  repo: SettingsRepository = Depends(get_settings_repository)):
    user_key = require_user(credential)
    try:
        repo.save(user_key, body)
    except OSError:
        logger.exception("Failed to write settings for %s", user_key)
        return JSONResponse(status_code=500, content={"error": "Failed to save settings"})
    return {"success": True}


def get_stored_settings(credential: Credential = Depends(get_credential),
                        repo: SettingsRepository = Depends(get_settings_repository)) -> HouseholdSettings:
    """Stored settings of the signed-in user, or defaults.

    Sync dependency so the file read runs in the threadpool, not on the event loop.
    """
    settings = None
    if credential.user_key:
        try:
            settings = repo.get(credential.user_key)
        except ValidationError:
            logger.exception("Stored settings for %s are invalid; using defaults", credential.user_key)
    return settings or HouseholdSettings()
