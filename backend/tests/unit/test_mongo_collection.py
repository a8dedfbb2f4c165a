"""
MongoCollection against a mongomock-motor client: the same contract the
in-memory backend satisfies, through Mongo's operators and unique indexes.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from selva.core.exceptions import Conflict
from selva.db.collection import DuplicateKeyError
from selva.db.database import create_mongo_database
from selva.seeds.seed_products import seed_products
from selva.services import resources
from selva.services.auth_service import AuthService
from selva.services.cart_service import CartService

pytestmark = pytest.mark.unit


@pytest_asyncio.fixture
async def mongo_db():
    db = create_mongo_database(AsyncMongoMockClient(tz_aware=True), f"selva_{uuid4().hex}")
    await db.ensure_indexes()
    return db


@pytest_asyncio.fixture
async def product_ids(mongo_db):
    await seed_products(mongo_db)
    return [p["id"] for p in await mongo_db["products"].find()]


# ============================================================================
# Documents
# ============================================================================


@pytest.mark.asyncio
async def test_documents_never_expose_object_id(mongo_db):
    things = mongo_db["products"]

    inserted = await things.insert({"name": "a"})
    fetched = await things.get(inserted["id"])
    listed = await things.find()

    assert "_id" not in inserted
    assert fetched == inserted
    assert all("_id" not in doc for doc in listed)


@pytest.mark.asyncio
async def test_find_keeps_insertion_order(mongo_db):
    things = mongo_db["services"]
    for name in ("first", "second", "third"):
        await things.insert({"name": name})

    assert [doc["name"] for doc in await things.find()] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_missing_ids(mongo_db):
    things = mongo_db["products"]

    assert await things.get("missing") is None
    assert await things.update("missing", {"name": "x"}) is None
    assert await things.delete("missing") is False
    assert await things.increment({"id": "missing"}, "views") is None


@pytest.mark.asyncio
async def test_delete_many_and_count(mongo_db):
    things = mongo_db["notifications"]
    await things.insert_many([{"k": 1}, {"k": 1}, {"k": 2}])

    assert await things.count({"k": 1}) == 2
    assert await things.delete_many({"k": 1}) == 2
    assert await things.count() == 1


# ============================================================================
# Unique indexes
# ============================================================================


@pytest.mark.asyncio
async def test_unique_email_index(mongo_db):
    await mongo_db.users.insert({"email": "a@example.com"})

    with pytest.raises(DuplicateKeyError):
        await mongo_db.users.insert({"email": "a@example.com"})
    assert await mongo_db.users.count() == 1


@pytest.mark.asyncio
async def test_unique_cart_pair_index(mongo_db):
    cart = mongo_db["cart_items"]
    await cart.insert({"userId": "u", "productId": "p", "quantity": 1})
    await cart.insert({"userId": "u", "productId": "q", "quantity": 1})

    with pytest.raises(DuplicateKeyError):
        await cart.insert({"userId": "u", "productId": "p", "quantity": 2})


@pytest.mark.asyncio
async def test_register_duplicate_email_conflicts(mongo_db, settings):
    auth = AuthService(mongo_db, settings)
    payload = {"name": "Amira", "email": "amira@example.com", "password": "secret123", "phone": "+20 1"}
    await auth.register(payload)

    with pytest.raises(Conflict):
        await auth.register({**payload, "name": "Someone Else"})
    assert await mongo_db.users.count({"email": "amira@example.com"}) == 1


# ============================================================================
# Atomic counters
# ============================================================================


@pytest.mark.asyncio
async def test_upsert_increment_reports_created_once(mongo_db):
    cart = mongo_db["cart_items"]
    match = {"userId": "u", "productId": "p"}

    doc, created = await cart.upsert_increment(match, "quantity", 2, defaults={"note": "x"})
    again, created_again = await cart.upsert_increment(match, "quantity", 3, defaults={"note": "y"})

    assert created is True
    assert created_again is False
    assert again["id"] == doc["id"]
    assert again["quantity"] == 5
    assert again["note"] == "x"
    assert "_id" not in again


@pytest.mark.asyncio
async def test_upsert_increment_retries_after_losing_insert_race(mongo_db, monkeypatch):
    cart = mongo_db["cart_items"]
    match = {"userId": "u", "productId": "p"}
    await cart.insert({**match, "quantity": 1})

    upsert = cart._upsert
    calls = []

    async def lose_first_attempt(match, update):
        calls.append(match)
        if len(calls) == 1:
            raise MongoDuplicateKeyError("E11000 duplicate key error")
        return await upsert(match, update)

    monkeypatch.setattr(cart, "_upsert", lose_first_attempt)

    doc, created = await cart.upsert_increment(match, "quantity", 2, defaults={})

    assert len(calls) == 2
    assert created is False
    assert doc["quantity"] == 3
    assert await cart.count(match) == 1


@pytest.mark.asyncio
async def test_blog_views_increment_on_published_posts_only(mongo_db, settings):
    blog = resources.BlogService(mongo_db, settings)
    post = await blog.create(
        {
            "title": "Chrome Nails",
            "content": "Mirror finishes",
            "excerpt": "Shine",
            "author": "Sarah",
            "category": "Trends",
            "isPublished": True,
        }
    )
    draft = await mongo_db["blog_posts"].insert({"title": "Draft", "isPublished": False, "views": 0})

    assert (await blog.get_by_id(post["id"]))["views"] == 1
    assert (await blog.get_by_id(post["id"]))["views"] == 2
    assert await mongo_db["blog_posts"].increment({"id": draft["id"], "isPublished": True}, "views") is None


# ============================================================================
# Services over Mongo
# ============================================================================


@pytest.mark.asyncio
async def test_cart_accumulates_and_removes_one_pair(mongo_db, product_ids):
    cart = CartService(mongo_db)

    _, created = await cart.add_item("u1", product_ids[0], 2)
    item, created_again = await cart.add_item("u1", product_ids[0], 3)
    await cart.add_item("u1", product_ids[1], 1)

    assert (created, created_again) == (True, False)
    assert item["quantity"] == 5
    assert await mongo_db["cart_items"].count({"userId": "u1", "productId": product_ids[0]}) == 1

    await cart.remove_item("u1", product_ids[0])
    listed = await cart.list_items("u1")

    assert [i["product"]["id"] for i in listed] == [product_ids[1]]
    assert "_id" not in listed[0]["product"]


@pytest.mark.asyncio
async def test_product_partial_update_keeps_other_fields(mongo_db, settings, product_ids):
    products = resources.ProductService(mongo_db, settings)
    before = await products.get_by_id(product_ids[0])

    updated = await products.update(product_ids[0], {"price": 99.0, "name": None})

    assert updated["price"] == 99.0
    assert updated["name"] == before["name"]
    assert updated["description"] == before["description"]
    assert updated["tags"] == before["tags"]
    assert "_id" not in updated
