from flask import Flask

from storefront.app.ui import ui_bp
from storefront.modules.auth.routes import bp as auth_bp
from storefront.modules.account.routes import bp as account_bp
from storefront.modules.catalog.routes import bp as catalog_bp


def register_blueprints(app: Flask) -> None:
    # Pages and form posts live at the root, JSON endpoints under /api
    app.register_blueprint(ui_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(account_bp, url_prefix="/api")
    app.register_blueprint(catalog_bp, url_prefix="/api")

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "Storefront API",
            "version": "0.1.0",
            "endpoints": {
                "auth": ["/signup", "/login", "/logout"],
                "account": ["/api/account"],
                "catalog": ["/api/products", "/api/products/<id>"],
            },
        }, 200
