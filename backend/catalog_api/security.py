import hmac
from typing import Optional

import bcrypt

from catalog_api.config import settings

MIN_ROUNDS = 10
# bcrypt only looks at the first 72 bytes; newer releases reject longer input
BCRYPT_MAX_BYTES = 72


def _bcrypt_input(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    rounds = max(MIN_ROUNDS, rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_bcrypt_input(password), bcrypt.gensalt(rounds=rounds)).decode()


def is_hashed(stored: str) -> bool:
    return bool(stored) and stored.startswith(("$2a$", "$2b$", "$2y$"))


def verify_password(password: str, stored: str) -> bool:
    """
    Check `password` against a stored value.

    Stored bcrypt hashes are verified with bcrypt, on the same 72-byte prefix
    hash_password uses. Anything else is treated as a legacy plaintext value and
    compared in constant time; callers should re-hash such rows once the check
    succeeds (see needs_rehash).
    """
    if not stored:
        return False
    if is_hashed(stored):
        try:
            return bcrypt.checkpw(_bcrypt_input(password), stored.encode())
        except ValueError:
            return False
    return hmac.compare_digest(password.encode(), stored.encode())


def needs_rehash(stored: str) -> bool:
    return not is_hashed(stored)
