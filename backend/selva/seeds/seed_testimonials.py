# selva/seeds/seed_testimonials.py
from datetime import datetime, timezone

from selva.db.database import Database
from selva.seeds.helpers import seed_collection


def _image(photo_id: int) -> str:
    return f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"


async def seed_testimonials(db: Database) -> int:
    testimonials = [
        {
            "customerName": "Fatima Al-Zahra",
            "customerImage": "https://images.pexels.com/photos/3762800/pexels-photo-3762800.jpeg",
            "rating": 5,
            "review": "Absolutely amazing service! The hard gel manicure lasted exactly as promised - 3 full weeks without a single chip. The staff is professional and the salon is spotless. I've found my new go-to nail salon!",
            "serviceUsed": "Hard Gel Manicure",
            "beforeImage": _image(3997407),
            "afterImage": _image(3997408),
            "createdAt": datetime(2024, 1, 20, 14, 30, tzinfo=timezone.utc),
            "isApproved": True,
            "isFeatured": True,
        },
        {
            "customerName": "Amira Hassan",
            "rating": 5,
            "review": "I've been coming to Selva for over a year now and they never disappoint. The nail art designs are creative and unique. Sarah always knows exactly what I want even when I can't explain it properly!",
            "serviceUsed": "Nail Art Design",
            "afterImage": _image(3997409),
            "createdAt": datetime(2024, 1, 18, 11, 15, tzinfo=timezone.utc),
            "isApproved": True,
            "isFeatured": True,
        },
        {
            "customerName": "Yasmin Mohamed",
            "rating": 4,
            "review": "Great experience overall. The French manicure came out perfect and the technician was very gentle. The only reason I'm not giving 5 stars is because I had to wait a bit longer than expected.",
            "serviceUsed": "French Hard Gel Manicure",
            "afterImage": _image(3997410),
            "createdAt": datetime(2024, 1, 15, 16, 45, tzinfo=timezone.utc),
            "isApproved": True,
            "isFeatured": False,
        },
        {
            "customerName": "Nour Abdullah",
            "rating": 5,
            "review": "The nail extensions look so natural! I was worried they would look fake but the technician matched my nail color perfectly. Very happy with the results and the quality of service.",
            "serviceUsed": "Hard Gel Nail Extensions",
            "beforeImage": _image(3997411),
            "afterImage": _image(3997412),
            "createdAt": datetime(2024, 1, 12, 13, 20, tzinfo=timezone.utc),
            "isApproved": True,
            "isFeatured": True,
        },
        {
            "customerName": "Layla Ahmed",
            "rating": 5,
            "review": "Best pedicure I've ever had! The hard gel on my toes has lasted over a month and still looks fresh. The massage was so relaxing and the staff made me feel pampered.",
            "serviceUsed": "Hard Gel Pedicure",
            "afterImage": _image(3997413),
            "createdAt": datetime(2024, 1, 10, 10, 30, tzinfo=timezone.utc),
            "isApproved": True,
            "isFeatured": False,
        },
        {
            "customerName": "Maryam Khalil",
            "rating": 5,
            "review": "I had a broken nail emergency and they fixed it perfectly! You can't even tell which nail was repaired. The repair service saved my nails for an important event.",
            "serviceUsed": "Nail Repair Service",
            "beforeImage": _image(3997414),
            "afterImage": _image(3997415),
            "createdAt": datetime(2024, 1, 8, 15, 10, tzinfo=timezone.utc),
            "isApproved": True,
            "isFeatured": False,
        },
    ]
    return await seed_collection(db["testimonials"], testimonials)
