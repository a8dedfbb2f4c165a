# selva/utils/time_utils.py
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware current time, used for every createdAt/updatedAt stamp."""
    return datetime.now(timezone.utc)
