from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

DEFAULT_METHOD = "scrypt"


class PasswordHasher:
    """Salted one-way password hashing.

    ``method`` is the werkzeug method string and doubles as the work factor,
    e.g. ``"scrypt:32768:8:1"`` or ``"pbkdf2:sha256:600000"``. The produced
    digest embeds method, salt and hash as ``method$salt$hash`` so it can be
    verified after the configured work factor changes.
    """

    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = 16) -> None:
        self.method = method
        self.salt_length = salt_length

    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("Password must not be empty")
        return generate_password_hash(password, method=self.method, salt_length=self.salt_length)

    def verify(self, password: str, hashed: str) -> bool:
        if not password or not hashed:
            return False
        try:
            return check_password_hash(hashed, password)
        except (ValueError, TypeError):
            # Malformed digest or unknown method
            return False
