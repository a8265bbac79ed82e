"""Settings repository: household records in one JSON file, keyed by user."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Optional, Union

from mealplan.utilities.config import SETTINGS_FILE
from mealplan.utilities.constants import SETTINGS_KEY_PREFIX
from mealplan.utilities.validators import HouseholdSettings

logger = logging.getLogger(__name__)

# one writer at a time: save() is a read-modify-write of the whole file
_write_lock = Lock()


def _settings_key(user_key: str) -> str:
    return f"{SETTINGS_KEY_PREFIX}{user_key}"


class SettingsRepository:
    def __init__(self, path: Union[str, Path] = SETTINGS_FILE):
        self.path = Path(path)

    def _load_store(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return json.load(f) or {}
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in settings file {self.path}: {e}")
            return {}

    def _atomic_write(self, store: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".settings_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def get_record(self, user_key: str) -> Optional[dict]:
        """Return the stored mapping as-is, or None."""
        return self._load_store().get(_settings_key(user_key))

    def get(self, user_key: str) -> Optional[HouseholdSettings]:
        """Return the validated settings for a user, or None when nothing is stored.

        Raises pydantic.ValidationError when the stored record has the wrong shape.
        """
        record = self.get_record(user_key)
        if record is None:
            return None
        return HouseholdSettings.model_validate(record)

    def save(self, user_key: str, settings: HouseholdSettings) -> None:
        with _write_lock:
            store = self._load_store()
            store[_settings_key(user_key)] = settings.to_record()
            self._atomic_write(store)
        logger.info(f"Settings saved for {user_key}")


__all__ = ['SettingsRepository']
