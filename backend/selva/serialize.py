# selva/serialize.py
PRIVATE_USER_FIELDS = ("passwordHash", "_id")


def serialize_user(user: dict) -> dict:
    """Public view of a user record; the password hash never leaves the service."""
    return {key: value for key, value in user.items() if key not in PRIVATE_USER_FIELDS}
