from __future__ import annotations

import click
from flask import Blueprint

from storefront.app.container import get_container
from storefront.app.extensions import db
from storefront.app.models import Product

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("init-db")
def init_db() -> None:
    """Create tables."""
    db.create_all()
    print("DB initialized (tables created).")


@cli_bp.cli.command("seed")
@click.option("--email", default="user@example.com", show_default=True)
@click.option("--password", default="Password123!", show_default=True)
def seed_data(email: str, password: str) -> None:
    """Seed minimal dev data.

    Safe to run multiple times; it will no-op if data exists.
    """
    db.create_all()
    container = get_container()

    if container.user_store.find_by_email(email) is None:
        container.auth_service.signup(
            {
                "name": "Demo User",
                "email": email,
                "phone": "555-0100",
                "password": password,
                "confirmPassword": password,
            }
        )

    if Product.query.count() == 0:
        products = [
            Product(name="Classic Gift Box", description="A sturdy box.", quantity=100, image_url="/img/box.jpg", category="boxes", price=29.99),
            Product(name="Wicker Basket", description="A wicker basket.", quantity=80, image_url="/img/basket.jpg", category="baskets", price=49.99),
            Product(name="Chocolate Fillers", description="Assorted chocolates.", quantity=300, image_url="/img/chocolate.jpg", category="fillers", price=12.99),
        ]
        db.session.add_all(products)
        db.session.commit()

    print(f"Seed complete. Login: {email} / {password}")


@cli_bp.cli.command("purge-sessions")
def purge_sessions() -> None:
    """Delete expired sessions."""
    removed = get_container().session_manager.purge_expired()
    print(f"Removed {removed} expired sessions.")
