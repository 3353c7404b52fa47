from __future__ import annotations

from datetime import datetime

from sqlalchemy.exc import IntegrityError

from storefront.app.common.errors import ConflictError
from storefront.app.common.store import store_call
from storefront.app.extensions import db
from storefront.app.models import SessionToken, User


class UserStore:
    def find_by_email(self, email: str) -> User | None:
        with store_call():
            return User.query.filter_by(email=email).first()

    def get(self, user_id: int) -> User | None:
        with store_call():
            return db.session.get(User, user_id)

    def insert(self, **fields) -> User:
        user = User(**fields)
        with store_call():
            db.session.add(user)
            try:
                db.session.commit()
            except IntegrityError as err:
                db.session.rollback()
                raise ConflictError() from err
            # Load generated columns while store errors are still translated
            db.session.refresh(user)
        return user


class SessionStore:
    def add(self, token: str, user_id: int, expires_at: datetime) -> None:
        with store_call():
            db.session.add(SessionToken(token=token, user_id=user_id, expires_at=expires_at))
            db.session.commit()

    def get(self, token: str) -> SessionToken | None:
        with store_call():
            return db.session.get(SessionToken, token)

    def delete(self, token: str) -> None:
        with store_call():
            SessionToken.query.filter_by(token=token).delete()
            db.session.commit()

    def delete_expired(self, now: datetime) -> int:
        with store_call():
            count = SessionToken.query.filter(SessionToken.expires_at <= now).delete()
            db.session.commit()
        return count
