# selva/seeds/seed_notifications.py
from datetime import datetime, timezone

from selva.db.database import Database
from selva.seeds.helpers import seed_collection


async def seed_notifications(db: Database) -> int:
    notifications = [
        {
            "type": "info",
            "title": "New Service Available",
            "message": "We now offer premium nail art designs with Swarovski crystals!",
            "read": False,
            "createdAt": datetime(2024, 1, 20, 10, 0, tzinfo=timezone.utc),
            "actionUrl": "/services",
        },
        {
            "type": "success",
            "title": "Booking Confirmed",
            "message": "Your appointment for January 25th at 2:00 PM has been confirmed.",
            "read": False,
            "createdAt": datetime(2024, 1, 19, 14, 30, tzinfo=timezone.utc),
            "actionUrl": "/booking",
        },
        {
            "type": "warning",
            "title": "Appointment Reminder",
            "message": "Don't forget your appointment tomorrow at 3:00 PM.",
            "read": True,
            "createdAt": datetime(2024, 1, 18, 9, 0, tzinfo=timezone.utc),
            "actionUrl": "/booking",
        },
    ]
    return await seed_collection(db["notifications"], notifications)
