import logging
from typing import Any

from bson import ObjectId
from pymongo.results import DeleteResult, UpdateResult

from toy_house.models.toy import TOY_DETAIL_PROJECTION, ToyCreate, ToyUpdate

logger = logging.getLogger(__name__)


def serialize_toy(doc: dict[str, Any]) -> dict[str, Any]:
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


async def list_toys(collection) -> list[dict]:
    docs = await collection.find().to_list(None)
    return [serialize_toy(doc) for doc in docs]


async def list_toys_by_seller(collection, email: str) -> list[dict]:
    docs = await collection.find({"sellerEmail": email}).to_list(None)
    return [serialize_toy(doc) for doc in docs]


async def get_toy(collection, toy_id: ObjectId) -> dict | None:
    doc = await collection.find_one({"_id": toy_id}, projection=TOY_DETAIL_PROJECTION)
    if doc is None:
        return None
    return serialize_toy(doc)


async def create_toy(collection, toy: ToyCreate) -> str:
    result = await collection.insert_one(toy.model_dump())
    logger.info(f"Created toy {result.inserted_id} for seller {toy.sellerEmail}")
    return str(result.inserted_id)


async def update_toy(collection, toy_id: ObjectId, update: ToyUpdate) -> UpdateResult | None:
    """
    Apply the mutable fields present in `update` to one toy.

    Returns None without touching the store when the body carried none of
    price / availableQuantity / detailDescription.
    """
    changes = update.changes()
    if not changes:
        return None

    result = await collection.update_one({"_id": toy_id}, {"$set": changes})
    logger.info(f"Update toy {toy_id}: matched={result.matched_count} modified={result.modified_count}")
    return result


async def delete_toy(collection, toy_id: ObjectId) -> DeleteResult:
    result = await collection.delete_one({"_id": toy_id})
    logger.info(f"Delete toy {toy_id}: deleted={result.deleted_count}")
    return result


def update_result_to_dict(result: UpdateResult) -> dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": str(upserted_id) if upserted_id is not None else None,
        "upsertedCount": 1 if upserted_id is not None else 0,
    }


def delete_result_to_dict(result: DeleteResult) -> dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
