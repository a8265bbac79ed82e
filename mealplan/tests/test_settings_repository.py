import json
import tempfile
import threading
import unittest
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from mealplan.infra.Settings_Repository import SettingsRepository
from mealplan.utilities.validators import ChildStage, CookingMode, HouseholdSettings


class TestHouseholdSettings(unittest.TestCase):

    def test_defaults(self):
        settings = HouseholdSettings()
        self.assertEqual(settings.adults, 2)
        self.assertEqual(settings.children, [])
        self.assertEqual(settings.model_number, "KN-HW24G")
        self.assertEqual(settings.cooking_mode, CookingMode.OFFICIAL)
        self.assertEqual(settings.calendar_id, "primary")
        self.assertEqual(settings.event_format, "[plan] {{menuName}}")

    def test_stored_record_is_validated(self):
        settings = HouseholdSettings.model_validate({
            "adults": 2,
            "children": [{"id": 1718000000000, "name": " Aoi ", "birthday": "", "stage": "toddler"}],
            "modelNumber": "KN-HW16G",
            "cookingMode": "manual",
            "calendarId": "",
            "calendarColor": "#039be5",
        })
        child = settings.children[0]
        self.assertEqual(child.name, "Aoi")
        self.assertIsNone(child.birthday)
        self.assertEqual(child.stage, ChildStage.TODDLER)
        self.assertEqual(settings.cooking_mode, CookingMode.MANUAL)
        self.assertEqual(settings.calendar_id, "primary")

    def test_invalid_values_are_rejected(self):
        with self.assertRaises(ValidationError):
            HouseholdSettings.model_validate({"adults": -1})
        with self.assertRaises(ValidationError):
            HouseholdSettings.model_validate({"cookingMode": "microwave"})
        with self.assertRaises(ValidationError):
            HouseholdSettings.model_validate({"children": [{"stage": "teenager"}]})


class TestSettingsRepository(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "settings.json"
        self.repo = SettingsRepository(self.path)

    def tearDown(self):
        self.tmp.cleanup()

    def test_get_without_file(self):
        self.assertIsNone(self.repo.get("a@example.com"))

    def test_save_and_get(self):
        settings = HouseholdSettings.model_validate({
            "children": [{"name": "Aoi", "birthday": "2022-04-01"}],
            "dislikes": "celery",
        })
        self.repo.save("a@example.com", settings)

        loaded = self.repo.get("a@example.com")
        self.assertEqual(loaded.dislikes, "celery")
        self.assertEqual(loaded.children[0].birthday, date(2022, 4, 1))
        self.assertIsNone(self.repo.get("b@example.com"))

        with open(self.path, encoding='utf-8') as f:
            store = json.load(f)
        self.assertIn("user_settings:a@example.com", store)
        self.assertEqual(store["user_settings:a@example.com"]["modelNumber"], "KN-HW24G")

    def test_invalid_stored_record(self):
        self.path.write_text(json.dumps({"user_settings:a@example.com": {"adults": "many"}}), encoding='utf-8')
        with self.assertRaises(ValidationError):
            self.repo.get("a@example.com")

    def test_concurrent_saves_keep_every_user(self):
        users = [f"user{i}@example.com" for i in range(40)]
        barrier = threading.Barrier(len(users))

        def save(user):
            barrier.wait()
            SettingsRepository(self.path).save(user, HouseholdSettings(dislikes=user))

        threads = [threading.Thread(target=save, args=(u,)) for u in users]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        with open(self.path, encoding='utf-8') as f:
            store = json.load(f)
        self.assertEqual(sorted(store), sorted(f"user_settings:{u}" for u in users))
        self.assertEqual(self.repo.get("user7@example.com").dislikes, "user7@example.com")

    def test_corrupt_file_reads_as_empty(self):
        self.path.write_text("{not json", encoding='utf-8')
        self.assertIsNone(self.repo.get("a@example.com"))


if __name__ == '__main__':
    unittest.main()
