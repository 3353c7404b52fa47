"""Translation of store connectivity failures into request errors."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import exc as sa_exc

from storefront.app.common.errors import StoreUnavailableError
from storefront.app.extensions import db

# Errors that mean the store is unreachable, not that the statement was wrong
UNAVAILABLE_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
)


@contextmanager
def store_call() -> Iterator[None]:
    try:
        yield
    except UNAVAILABLE_ERRORS as err:
        db.session.rollback()
        raise StoreUnavailableError() from err
