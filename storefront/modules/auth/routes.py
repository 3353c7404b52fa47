from __future__ import annotations

from flask import Blueprint, redirect, url_for

from storefront.app.common.auth import clear_session_cookie, session_token, set_session_cookie
from storefront.app.common.validation import get_payload
from storefront.app.container import get_container

bp = Blueprint("auth", __name__)


@bp.post("/signup")
def signup():
    """POST /signup - Register a new user."""
    user = get_container().auth_service.signup(get_payload())
    return {"message": "User registered successfully", "user": user.public_dict()}, 201


@bp.post("/login")
def login():
    """POST /login - Authenticate, set the session cookie and go to the products page."""
    _user, token = get_container().auth_service.login(get_payload())
    response = redirect(url_for("ui.products_page"))
    return set_session_cookie(response, token)


@bp.get("/logout")
def logout():
    """GET /logout - Terminate the session."""
    get_container().auth_service.logout(session_token())
    return clear_session_cookie(redirect(url_for("ui.login_page")))
