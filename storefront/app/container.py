from __future__ import annotations

from functools import cached_property
from typing import Any, Mapping

from flask import current_app

from storefront.modules.auth.passwords import PasswordHasher
from storefront.modules.auth.service import AuthService
from storefront.modules.auth.sessions import SessionManager
from storefront.modules.auth.store import SessionStore, UserStore
from storefront.modules.catalog.store import ProductStore

EXTENSION_KEY = "storefront"


class Container:
    """Explicitly constructed collaborators for one app instance."""

    def __init__(self, config: Mapping[str, Any]) -> None:
        self._config = config

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return PasswordHasher(
            method=self._config["PASSWORD_HASH_METHOD"],
            salt_length=self._config["PASSWORD_SALT_LENGTH"],
        )

    @cached_property
    def user_store(self) -> UserStore:
        return UserStore()

    @cached_property
    def session_store(self) -> SessionStore:
        return SessionStore()

    @cached_property
    def product_store(self) -> ProductStore:
        return ProductStore()

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(self.session_store, ttl_seconds=self._config["SESSION_TTL_SECONDS"])

    @cached_property
    def auth_service(self) -> AuthService:
        return AuthService(
            users=self.user_store,
            sessions=self.session_manager,
            password_hasher=self.password_hasher,
            unify_login_errors=self._config["UNIFY_LOGIN_ERRORS"],
        )


def get_container() -> Container:
    return current_app.extensions[EXTENSION_KEY]
