from functools import lru_cache

import bcrypt

from judging.core.config import settings


def _encode(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes
    return password.encode("utf-8")[:72]


def hash_password(password: str, rounds: int = None) -> str:
    salt = bcrypt.gensalt(rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Constant-time check of `password` against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        # malformed hash in the store
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("not-a-real-password")


def burn_password_check(password: str) -> None:
    """Spend one bcrypt check when there is no stored hash to compare against.

    Keeps "unknown account" and "wrong password" indistinguishable by timing.
    """
    verify_password(password, _dummy_hash())
