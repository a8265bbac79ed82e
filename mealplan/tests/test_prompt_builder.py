from datetime import date
import unittest

from mealplan.logic.prompting.prompt_builder import build_prompt, compute_age, format_children_ages
from mealplan.utilities.validators import Child, HouseholdSettings, PlanRequestInput


class TestAgeComputation(unittest.TestCase):

    def test_birthday_not_yet_reached_this_year(self):
        today = date(2024, 6, 15)
        birthday = date(2023, 6, 16)  # one year minus one day ago
        self.assertEqual(today.year - birthday.year, 1)
        self.assertEqual(compute_age(birthday, today), 0)

    def test_birthday_today(self):
        self.assertEqual(compute_age(date(2020, 6, 15), date(2024, 6, 15)), 4)

    def test_earlier_month(self):
        self.assertEqual(compute_age(date(2021, 11, 3), date(2024, 2, 1)), 2)

    def test_format_children_ages(self):
        today = date(2024, 6, 15)
        children = [
            Child(name="Aoi", birthday=date(2021, 1, 10)),
            Child(name="Ren", birthday=""),
        ]
        self.assertEqual(format_children_ages(children, today), "3 yrs / ? yrs")

    def test_format_without_children(self):
        self.assertEqual(format_children_ages([]), "not set")


class TestBuildPrompt(unittest.TestCase):

    def setUp(self):
        self.settings = HouseholdSettings.model_validate({
            "adults": 2,
            "children": [{"id": 1, "name": "Aoi", "birthday": "2023-05-01", "stage": "toddler"}],
            "dislikes": "celery",
            "modelNumber": "KN-HW16G",
            "cookingMode": "manual",
        })
        self.today = date(2024, 6, 15)

    def test_output_shape_is_pinned(self):
        prompt = build_prompt(PlanRequestInput(durationDays=5), self.settings, self.today)
        self.assertIn("Duration: 5 days", prompt)
        self.assertIn("exactly 5 string elements", prompt)
        self.assertIn('"days" must be an array with exactly 5 elements', prompt)
        self.assertIn('"shoppingList"', prompt)
        self.assertIn("JSON only", prompt)
        self.assertIn("no code fences", prompt)

    def test_day_structure_and_toddler_step(self):
        prompt = build_prompt(PlanRequestInput(durationDays=2), self.settings, self.today)
        self.assertIn('"[Day n]"', prompt)
        self.assertIn('"[menu]"', prompt)
        self.assertIn('"[recipe]"', prompt)
        self.assertIn("toddler-safe serving", prompt)
        self.assertIn("Never use calendar dates", prompt)

    def test_household_details(self):
        request = PlanRequestInput(durationDays=3, freeText="more fish please")
        prompt = build_prompt(request, self.settings, self.today)
        self.assertIn("KN-HW16G", prompt)
        self.assertIn("Cooking mode: manual", prompt)
        self.assertIn("Adults: 2", prompt)
        self.assertIn("Children's ages: 1 yrs", prompt)
        self.assertIn("celery", prompt)
        self.assertIn("more fish please", prompt)

    def test_empty_free_text(self):
        prompt = build_prompt(PlanRequestInput(durationDays=1), HouseholdSettings(), self.today)
        self.assertIn("Requests: none", prompt)
        self.assertIn("Children's ages: not set", prompt)


if __name__ == '__main__':
    unittest.main()
