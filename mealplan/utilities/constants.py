from typing import Final

DEFAULT_CALENDAR_ID: Final[str] = "primary"
DEFAULT_MODEL_NUMBER: Final[str] = "KN-HW24G"
DEFAULT_DURATION_DAYS: Final[int] = 3

# Headings the model is asked to put inside every day entry
DAY_HEADING: Final[str] = "[Day {n}]"
MENU_HEADING: Final[str] = "[menu]"
RECIPE_HEADING: Final[str] = "[recipe]"

# Calendar event titles
MENU_NAME_PLACEHOLDER: Final[str] = "{{menuName}}"
DEFAULT_EVENT_FORMAT: Final[str] = "[plan] {{menuName}}"
UNTITLED_MENU: Final[str] = "(untitled)"

SETTINGS_KEY_PREFIX: Final[str] = "user_settings:"

PROMPT_TEMPLATE: Final[str] = (
    """You are a JSON data generation API. Create a meal plan that follows the requirements below.

# Input
Duration: {duration} days
Household settings:
{settings_info}
Requests: {free_text}

# Cooking requirements
1. IMPORTANT: every recipe procedure must include a step that separates a toddler-safe serving
   (for example: take a portion out before seasoning, chop finely, dilute with hot water).
2. Vary the menu; do not repeat the same dish within the plan.

# Output format (JSON only)
Return only the JSON object below. No Markdown, no code fences (```json), no greetings or prose.
The "days" array must be split into exactly {duration} string elements.

Example:
{example}

# Rules
1. "days" must be an array with exactly {duration} elements, one day's menu per element.
   Do not merge several days into one string.
2. Start every element with a heading in the form "[Day n]". Never use calendar dates
   (such as January 1 or 2024-01-01) in headings.
3. Every element must contain the headings "[menu]" and "[recipe]".
4. Put the shopping list only in the "shoppingList" value, never inside the "days" array.
"""
)

PROMPT_OUTPUT_EXAMPLE: Final[str] = (
    """{
  "days": [
    "[Day 1]\\n[menu]\\nCurry Rice\\n[recipe]\\nIngredients: ... Steps: ...",
    "[Day 2]\\n[menu]\\nGrilled Fish\\n[recipe]\\nIngredients: ... Steps: ...",
    "[Day 3]\\n[menu]\\nHamburg Steak\\n[recipe]\\nIngredients: ... Steps: ..."
  ],
  "shoppingList": "- potatoes\\n- carrots\\n- onions ..."
}"""
)

# Canned response used by the sample (debug) endpoint
SAMPLE_PLAN_JSON: Final[dict] = {
    "days": [
        "[Day 1]\n[menu]\nSimmered chicken and daikon\n[recipe]\nIngredients: chicken, daikon\nSteps: simmer; take out the toddler portion before seasoning",
        "[Day 2]\n[menu]\nSteamed salmon\n[recipe]\nIngredients: salmon, mushrooms\nSteps: steam; flake the toddler portion and remove bones",
        "[Day 3]\n[menu]\nPork and cabbage stir-fry\n[recipe]\nIngredients: pork, cabbage\nSteps: stir-fry; chop the toddler portion finely",
    ],
    "shoppingList": "[meat / fish]\n- chicken\n- salmon\n- pork\n[vegetables]\n- daikon\n- mushrooms\n- cabbage",
}
