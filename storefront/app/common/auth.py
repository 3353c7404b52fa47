"""Session-cookie auth for routes.

The cookie holds an opaque token; the session manager resolves it to a user
id, which is stored on ``g.user_id`` for the view.
"""

from functools import wraps
from typing import Callable, TypeVar, Any

from flask import current_app, g, redirect, request, url_for

from storefront.app.common.errors import AuthenticationRequired
from storefront.app.container import get_container

F = TypeVar("F", bound=Callable[..., Any])


def session_token() -> str | None:
    return request.cookies.get(current_app.config["AUTH_COOKIE_NAME"])


def current_user_id() -> int | None:
    if "user_id" not in g:
        g.user_id = get_container().auth_service.current_user_id(session_token())
    return g.user_id


def set_session_cookie(response, token: str):
    config = current_app.config
    response.set_cookie(
        config["AUTH_COOKIE_NAME"],
        token,
        max_age=config["SESSION_TTL_SECONDS"],
        secure=config["AUTH_COOKIE_SECURE"],
        httponly=True,
        samesite="Lax",
    )
    return response


def clear_session_cookie(response):
    response.delete_cookie(current_app.config["AUTH_COOKIE_NAME"])
    return response


def login_required(fn: F) -> F:
    """API paths get a 401 JSON error, pages are redirected to the login page."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        if current_user_id() is None:
            if request.path.startswith("/api/"):
                raise AuthenticationRequired()
            return redirect(url_for("ui.login_page"))
        return fn(*args, **kwargs)

    return wrapper  # type: ignore
