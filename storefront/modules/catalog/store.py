from __future__ import annotations

from typing import Any, Dict, List

from storefront.app.common.store import store_call
from storefront.app.extensions import db
from storefront.app.models import Product


class ProductStore:
    def list(self) -> List[Product]:
        with store_call():
            return Product.query.order_by(Product.id.asc()).all()

    def get(self, product_id: int) -> Product | None:
        with store_call():
            return db.session.get(Product, product_id)

    def insert(self, fields: Dict[str, Any]) -> Product:
        product = Product(**fields)
        with store_call():
            db.session.add(product)
            db.session.commit()
            db.session.refresh(product)
        return product

    def update(self, product_id: int, fields: Dict[str, Any]) -> Product | None:
        with store_call():
            product = db.session.get(Product, product_id)
            if product is None:
                return None
            for key, value in fields.items():
                setattr(product, key, value)
            db.session.commit()
            db.session.refresh(product)
        return product

    def delete(self, product_id: int) -> bool:
        with store_call():
            deleted = Product.query.filter_by(id=product_id).delete()
            db.session.commit()
        return deleted > 0
