"""Request credential extraction.

The session provider sits in front of this service and forwards the Google
access token as a bearer token plus the signed-in user's e-mail. Neither is
inspected beyond presence.
"""
from typing import Optional

from fastapi import Header

from mealplan.domain.Credential import Credential
from mealplan.domain.errors import MissingCredential


def get_credential(authorization: Optional[str] = Header(default=None),
                   x_user_email: Optional[str] = Header(default=None)) -> Credential:
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[7:].strip() or None
    user_key = (x_user_email or "").strip() or None
    return Credential(access_token=token, user_key=user_key)


def require_user(credential: Credential) -> str:
    if not credential.user_key:
        raise MissingCredential("Unauthorized")
    return credential.user_key


__all__ = ['get_credential', 'require_user']
