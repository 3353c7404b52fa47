from __future__ import annotations

import re
from typing import Any, Dict, Iterable
from flask import request

from storefront.app.common.errors import ValidationError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def get_json() -> Dict[str, Any]:
    if not request.is_json:
        raise ValidationError("Request must be application/json")
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        raise ValidationError("Malformed JSON body")
    return data


def get_payload() -> Dict[str, Any]:
    """JSON body, or the submitted form for HTML pages."""
    if request.is_json:
        return get_json()
    return request.form.to_dict()


def require_fields(data: Dict[str, Any], fields: Iterable[str], message: str = "Please enter all fields") -> None:
    missing = [f for f in fields if _is_blank(data.get(f))]
    if missing:
        raise ValidationError(message, {"missing": missing})


def require_text(data: Dict[str, Any], fields: Iterable[str]) -> None:
    """Fields that are present must be strings; absent or null ones are skipped."""
    invalid = [f for f in fields if data.get(f) is not None and not isinstance(data[f], str)]
    if invalid:
        raise ValidationError("Fields must be text", {"invalid": invalid})


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value or ""))


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
