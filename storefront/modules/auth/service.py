"""Signup, login and logout orchestration.

The service holds no per-request state: users live in the user store and
identities in the session manager, both handed in at construction time.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from storefront.app.common.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from storefront.app.common.validation import is_valid_email, require_fields, require_text
from storefront.modules.auth.passwords import PasswordHasher
from storefront.modules.auth.sessions import SessionManager

logger = logging.getLogger(__name__)

SIGNUP_FIELDS = ["name", "email", "password", "confirmPassword"]
LOGIN_FIELDS = ["email", "password"]
PROFILE_FIELDS = ["phone", "gender"]


class AuthService:
    def __init__(
        self,
        *,
        users,
        sessions: SessionManager,
        password_hasher: PasswordHasher,
        unify_login_errors: bool = False,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher
        self._unify_login_errors = unify_login_errors

    def signup(self, data: Dict[str, Any]):
        require_fields(data, SIGNUP_FIELDS)
        require_text(data, SIGNUP_FIELDS + PROFILE_FIELDS)

        password = data["password"]
        if password != data["confirmPassword"]:
            raise ValidationError("Passwords do not match")

        email = data["email"].strip()
        if not is_valid_email(email):
            raise ValidationError("Invalid email format")

        if self._users.find_by_email(email) is not None:
            raise ConflictError()

        user = self._users.insert(
            name=data["name"].strip(),
            email=email,
            phone=_optional(data.get("phone")),
            gender=_optional(data.get("gender")),
            password_hash=self._password_hasher.hash(password),
        )
        logger.info("Registered user %s", user.id)
        return user

    def login(self, data: Dict[str, Any]):
        """Return ``(user, session_token)`` for valid credentials."""
        require_fields(data, LOGIN_FIELDS)
        require_text(data, LOGIN_FIELDS)

        email = data["email"].strip()
        user = self._users.find_by_email(email)
        if user is None:
            logger.info("Login for unknown email")
            if self._unify_login_errors:
                raise InvalidCredentialsError()
            raise NotFoundError("User does not exist")

        if not self._password_hasher.verify(data["password"], user.password_hash):
            logger.info("Login with bad password for user %s", user.id)
            raise InvalidCredentialsError()

        token = self._sessions.create(user.id)
        logger.info("User %s logged in", user.id)
        return user, token

    def logout(self, token: str | None) -> None:
        self._sessions.destroy(token)

    def current_user_id(self, token: str | None) -> int | None:
        return self._sessions.resolve(token)

    def account(self, user_id: int):
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user


def _optional(value: Any) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
