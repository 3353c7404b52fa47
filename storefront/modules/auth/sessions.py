from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable

from storefront.app.models import utcnow

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60
TOKEN_BYTES = 32


class SessionManager:
    """Server-side sessions: opaque token -> user id, absolute expiry."""

    def __init__(
        self,
        store,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._store = store
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock

    def create(self, user_id: int) -> str:
        token = secrets.token_urlsafe(TOKEN_BYTES)
        self._store.add(token, user_id, self._clock() + self._ttl)
        return token

    def resolve(self, token: str | None) -> int | None:
        if not token:
            return None
        record = self._store.get(token)
        if record is None:
            return None
        if record.expires_at <= self._clock():
            self._store.delete(token)
            return None
        return record.user_id

    def destroy(self, token: str | None) -> None:
        if token:
            self._store.delete(token)

    def purge_expired(self) -> int:
        removed = self._store.delete_expired(self._clock())
        logger.info("Purged %d expired sessions", removed)
        return removed
