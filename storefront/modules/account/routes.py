from flask import Blueprint

from storefront.app.common.auth import current_user_id, login_required
from storefront.app.container import get_container

bp = Blueprint("account", __name__)


@bp.get("/account")
@login_required
def account():
    """GET /api/account - Profile of the signed-in user."""
    user = get_container().auth_service.account(current_user_id())
    return {"name": user.name, "email": user.email, "phone": user.phone}, 200
