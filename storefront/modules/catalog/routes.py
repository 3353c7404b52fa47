from __future__ import annotations

import math
from typing import Any, Dict

from flask import Blueprint

from storefront.app.common.auth import login_required
from storefront.app.common.errors import NotFoundError, ValidationError
from storefront.app.common.validation import get_json, require_fields, require_text
from storefront.app.container import get_container

bp = Blueprint("catalog", __name__)

PRODUCT_FIELDS = ["name", "description", "quantity", "imageUrl"]
TEXT_FIELDS = ["name", "description", "imageUrl", "category"]


def _parse_quantity(value: Any) -> int:
    # bool is an int subclass; floats must be whole numbers
    if isinstance(value, bool):
        raise ValidationError("Quantity must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError("Quantity must be an integer")
        value = int(value)
    try:
        quantity = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Quantity must be an integer") from None
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
    return quantity


def _parse_price(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("Price must be a number")
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Price must be a number") from None
    if not math.isfinite(price):
        raise ValidationError("Price must be a finite number")
    if price < 0:
        raise ValidationError("Price cannot be negative")
    return price


def _product_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a product body and map it onto record columns."""
    require_fields(data, PRODUCT_FIELDS)
    require_text(data, TEXT_FIELDS)

    return {
        "name": data["name"].strip(),
        "description": data["description"].strip(),
        "quantity": _parse_quantity(data["quantity"]),
        "image_url": data["imageUrl"].strip(),
        "category": (data.get("category") or "").strip() or None,
        "price": _parse_price(data.get("price")),
    }


@bp.get("/products")
def list_products():
    """GET /api/products - Retrieve all products."""
    products = get_container().product_store.list()
    return {"items": [p.to_dict() for p in products]}, 200


@bp.get("/products/<int:product_id>")
def get_product(product_id: int):
    """GET /api/products/<id> - Retrieve product details."""
    product = get_container().product_store.get(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product.to_dict(), 200


@bp.post("/products")
@login_required
def create_product():
    """POST /api/products - Add a product."""
    fields = _product_fields(get_json())
    product = get_container().product_store.insert(fields)
    return product.to_dict(), 201


@bp.put("/products/<int:product_id>")
@login_required
def update_product(product_id: int):
    """PUT /api/products/<id> - Replace a product and return the stored record."""
    fields = _product_fields(get_json())
    product = get_container().product_store.update(product_id, fields)
    if product is None:
        raise NotFoundError("Product not found")
    return product.to_dict(), 200


@bp.delete("/products/<int:product_id>")
@login_required
def delete_product(product_id: int):
    """DELETE /api/products/<id> - Remove a product."""
    if not get_container().product_store.delete(product_id):
        raise NotFoundError("Product not found")
    return {"message": "Product deleted successfully"}, 200
