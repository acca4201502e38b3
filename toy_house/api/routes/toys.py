import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from toy_house.database.mongo import get_toy_collection
from toy_house.models.toy import ToyCreate, ToyUpdate, parse_toy_id
from toy_house.services import toy_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _invalid_id() -> JSONResponse:
    return _error("Invalid toy ID format", 400)


@router.get("/toys")
async def list_toys(collection=Depends(get_toy_collection)):
    try:
        return await toy_service.list_toys(collection)
    except PyMongoError:
        logger.exception("Error fetching toys")
        return _error("Failed to fetch toys.", 500)


@router.get("/my-toys")
async def list_my_toys(email: Optional[str] = None, collection=Depends(get_toy_collection)):
    """Toys listed by one seller, matched exactly on `sellerEmail`."""
    if not email:
        return _error("User email is required.", 400)

    try:
        toys = await toy_service.list_toys_by_seller(collection, email)
    except PyMongoError:
        logger.exception("Error fetching toys for seller %s", email)
        return _error("Failed to fetch toys.", 500)

    if not toys:
        return JSONResponse({"message": "No toys found for this user."}, status_code=404)

    return toys


@router.get("/toys/{toy_id}")
async def get_toy(toy_id: str, collection=Depends(get_toy_collection)):
    oid = parse_toy_id(toy_id)
    if oid is None:
        return _invalid_id()

    try:
        toy = await toy_service.get_toy(collection, oid)
    except PyMongoError:
        logger.exception("Error fetching toy %s", toy_id)
        return _error("Failed to fetch toy.", 500)

    if toy is None:
        return _error("Toy not found", 404)

    return toy


@router.post("/toys", status_code=201)
async def create_toy(
    payload: Optional[dict[str, Any]] = Body(default=None),
    collection=Depends(get_toy_collection),
):
    try:
        toy = ToyCreate.model_validate(payload or {})
    except ValidationError as e:
        logger.debug("Rejected toy payload: %s", e)
        return _error("All fields are required.", 400)

    try:
        toy_id = await toy_service.create_toy(collection, toy)
    except PyMongoError:
        logger.exception("Error inserting toy")
        return _error("Failed to add toy.", 500)

    return {"message": "Toy added successfully", "toyId": toy_id}


@router.put("/toys/{toy_id}")
async def update_toy(
    toy_id: str,
    payload: Optional[dict[str, Any]] = Body(default=None),
    collection=Depends(get_toy_collection),
):
    """
    Partial update of price, availableQuantity and detailDescription.

    Any other field in the body is ignored. A missing toy and an update
    that changes nothing both answer 404.
    """
    oid = parse_toy_id(toy_id)
    if oid is None:
        return _invalid_id()

    try:
        update = ToyUpdate.model_validate(payload or {})
    except ValidationError as e:
        logger.debug("Rejected toy update payload: %s", e)
        return _error("Invalid request body.", 400)

    try:
        result = await toy_service.update_toy(collection, oid, update)
    except PyMongoError:
        logger.exception("Error updating toy %s", toy_id)
        return _error("Failed to update toy.", 500)

    if result is None or result.modified_count == 0:
        return _error("Toy not found or not updated", 404)

    return {
        "message": "Toy updated successfully",
        "result": toy_service.update_result_to_dict(result),
    }


@router.delete("/toys/{toy_id}")
async def delete_toy(toy_id: str, collection=Depends(get_toy_collection)):
    oid = parse_toy_id(toy_id)
    if oid is None:
        return _invalid_id()

    try:
        result = await toy_service.delete_toy(collection, oid)
    except PyMongoError:
        logger.exception("Error deleting toy %s", toy_id)
        return _error("Failed to delete toy.", 500)

    if result.deleted_count == 0:
        return _error("Toy not found", 404)

    return {
        "message": "Toy deleted successfully",
        "result": toy_service.delete_result_to_dict(result),
    }
