# selva/seeds/seed_services.py
from selva.db.database import Database
from selva.seeds.helpers import seed_collection


def _service(name, description, price, duration, photo_id, category, features, is_popular):
    return {
        "name": name,
        "description": description,
        "price": price,
        "duration": duration,
        "image": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg",
        "category": category,
        "features": features,
        "isPopular": is_popular,
        "views": 0,
    }


async def seed_services(db: Database) -> int:
    services = [
        _service(
            "Classic Hard Gel Manicure",
            "Professional hard gel application with classic finish. Long-lasting, chip-resistant, and perfect for everyday wear.",
            45, 60, 3997390, "Manicure",
            ["Nail shaping", "Cuticle care", "Hard gel application", "Classic finish"],
            True,
        ),
        _service(
            "French Hard Gel Manicure",
            "Elegant French manicure with hard gel for a timeless, sophisticated look that lasts.",
            55, 75, 3997391, "Manicure",
            ["French tip design", "Hard gel application", "Perfect white tips", "Natural pink base"],
            True,
        ),
        _service(
            "Hard Gel Nail Extensions",
            "Beautiful nail extensions using premium hard gel for length and strength.",
            75, 120, 3997392, "Extensions",
            ["Custom length", "Shape selection", "Hard gel overlay", "Natural finish"],
            False,
        ),
        _service(
            "Nail Art Design",
            "Creative nail art with intricate designs, patterns, and decorative elements.",
            65, 90, 3997393, "Nail Art",
            ["Custom designs", "Hand-painted art", "Decorative elements", "Unique patterns"],
            True,
        ),
        _service(
            "Hard Gel Pedicure",
            "Luxurious pedicure service with hard gel application for beautiful, long-lasting results.",
            50, 90, 3997394, "Pedicure",
            ["Foot soak", "Exfoliation", "Hard gel application", "Massage"],
            False,
        ),
        _service(
            "Nail Repair Service",
            "Professional nail repair for damaged or broken nails using hard gel techniques.",
            35, 45, 3997395, "Repair",
            ["Damage assessment", "Structural repair", "Hard gel reinforcement", "Natural finish"],
            False,
        ),
    ]
    return await seed_collection(db["services"], services)
