# selva/utils/hash_utils.py
from passlib.hash import argon2


def hash_password(password: str) -> str:
    """Hash plain password with Argon2 (salted, library default cost)."""
    return argon2.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password or not hashed_password.startswith("$argon2"):
        return False
    return argon2.verify(plain_password, hashed_password)
