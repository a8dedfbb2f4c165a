# selva/seeds/seed_products.py
from selva.db.database import Database
from selva.seeds.helpers import seed_collection


def _image(photo_id: int) -> str:
    return f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"


async def seed_products(db: Database) -> int:
    products = [
        {
            "name": "Professional Hard Gel Kit",
            "description": "Complete hard gel kit with everything you need for professional nail applications at home.",
            "price": 89.99,
            "discountPrice": 69.99,
            "images": [_image(3997396), _image(3997397)],
            "category": "Kits",
            "brand": "Selva Pro",
            "inStock": True,
            "stockQuantity": 25,
            "rating": 4.8,
            "reviews": 124,
            "tags": ["professional", "complete-kit", "hard-gel"],
            "isNew": True,
            "isFeatured": True,
        },
        {
            "name": "UV LED Nail Lamp 48W",
            "description": "Professional UV LED nail lamp with 48W power for quick and efficient curing.",
            "price": 79.99,
            "discountPrice": None,
            "images": [_image(3997398)],
            "category": "Equipment",
            "brand": "NailTech",
            "inStock": True,
            "stockQuantity": 15,
            "rating": 4.6,
            "reviews": 89,
            "tags": ["uv-lamp", "led", "professional"],
            "isNew": False,
            "isFeatured": True,
        },
        {
            "name": "Hard Gel Base Coat",
            "description": "Premium base coat for hard gel applications, ensures long-lasting adhesion.",
            "price": 24.99,
            "discountPrice": None,
            "images": [_image(3997399)],
            "category": "Gels",
            "brand": "Selva Pro",
            "inStock": True,
            "stockQuantity": 50,
            "rating": 4.7,
            "reviews": 156,
            "tags": ["base-coat", "hard-gel", "adhesion"],
            "isNew": False,
            "isFeatured": False,
        },
        {
            "name": "Nail File Set Professional",
            "description": "Set of professional nail files in various grits for perfect nail shaping.",
            "price": 19.99,
            "discountPrice": None,
            "images": [_image(3997400)],
            "category": "Tools",
            "brand": "ProTools",
            "inStock": True,
            "stockQuantity": 75,
            "rating": 4.5,
            "reviews": 203,
            "tags": ["nail-files", "professional", "shaping"],
            "isNew": False,
            "isFeatured": False,
        },
        {
            "name": "Cuticle Oil Vitamin E",
            "description": "Nourishing cuticle oil enriched with Vitamin E for healthy nail growth.",
            "price": 14.99,
            "discountPrice": None,
            "images": [_image(3997401)],
            "category": "Care",
            "brand": "NailCare Plus",
            "inStock": True,
            "stockQuantity": 100,
            "rating": 4.9,
            "reviews": 87,
            "tags": ["cuticle-oil", "vitamin-e", "nourishing"],
            "isNew": True,
            "isFeatured": False,
        },
        {
            "name": "Hard Gel Color Collection",
            "description": "Set of 12 popular hard gel colors for endless nail art possibilities.",
            "price": 149.99,
            "discountPrice": 119.99,
            "images": [_image(3997402)],
            "category": "Gels",
            "brand": "Selva Pro",
            "inStock": True,
            "stockQuantity": 20,
            "rating": 4.8,
            "reviews": 95,
            "tags": ["color-collection", "hard-gel", "nail-art"],
            "isNew": False,
            "isFeatured": True,
        },
    ]
    return await seed_collection(db["products"], products)
