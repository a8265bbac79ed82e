"""Credential value passed explicitly from the web layer into calendar/settings calls."""
from typing import Optional


class Credential:
    def __init__(self, access_token: Optional[str] = None, user_key: Optional[str] = None):
        self.access_token = access_token
        self.user_key = user_key

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)

    def __str__(self) -> str:
        # never print the token itself
        return f"Credential(user={self.user_key or '-'}, token={'set' if self.access_token else 'missing'})"

    __repr__ = __str__
