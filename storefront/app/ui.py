"""Static HTML pages; the catalog and account pages require a session."""

from pathlib import Path

from flask import Blueprint, redirect, send_from_directory, url_for

from storefront.app.common.auth import login_required

PUBLIC_DIR = Path(__file__).resolve().parent / "public"

ui_bp = Blueprint("ui", __name__)


def _page(name: str):
    return send_from_directory(PUBLIC_DIR, f"{name}.html")


@ui_bp.get("/")
def index():
    return redirect(url_for("ui.home_page"))


@ui_bp.get("/home")
def home_page():
    return _page("home")


@ui_bp.get("/signup")
def signup_page():
    return _page("signup")


@ui_bp.get("/login")
def login_page():
    return _page("login")


@ui_bp.get("/products")
@login_required
def products_page():
    return _page("products")


@ui_bp.get("/add-product")
@login_required
def add_product_page():
    return _page("add-product")


@ui_bp.get("/manage-products")
@login_required
def manage_products_page():
    return _page("manage-products")


@ui_bp.get("/account")
@login_required
def account_page():
    return _page("account")
