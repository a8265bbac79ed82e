"""Plan domain entity: normalized day entries plus one shopping list."""
from typing import List, Optional


class NormalizedPlan:
    def __init__(self, days: Optional[List[str]] = None, shopping_list: str = "",
                 requested_days: int = 0, raw: str = ""):
        self.days = days[:] if days else []
        self.shopping_list = shopping_list
        self.requested_days = requested_days
        self.raw = raw

    @property
    def shortfall(self) -> int:
        """Number of requested days the model did not deliver (never negative)."""
        return max(self.requested_days - len(self.days), 0)

    def to_dict(self):
        return {
            "days": self.days,
            "shoppingList": self.shopping_list,
            "requestedDays": self.requested_days,
            "shortfall": self.shortfall,
            "raw": self.raw,
        }

    def __str__(self) -> str:
        return f"NormalizedPlan - {len(self.days)}/{self.requested_days} days - Shopping list: {'yes' if self.shopping_list else 'no'}"

    __repr__ = __str__
