from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Fields returned by GET /toys/{id}; _id comes back by default, subCategory is left out
TOY_DETAIL_PROJECTION = {
    "pictureUrl": 1,
    "name": 1,
    "sellerName": 1,
    "sellerEmail": 1,
    "price": 1,
    "rating": 1,
    "availableQuantity": 1,
    "detailDescription": 1,
}


class ToyCreate(BaseModel):
    """
    A full toy listing as posted by the client.

    Every field is required and must be truthy: empty strings and zero
    numbers are rejected the same way as missing fields.
    """

    model_config = ConfigDict(extra="ignore")

    pictureUrl: str = Field(min_length=1)
    name: str = Field(min_length=1)
    sellerName: str = Field(min_length=1)
    sellerEmail: str = Field(min_length=1)
    subCategory: str = Field(min_length=1)
    price: float
    rating: float
    availableQuantity: int | float
    detailDescription: str = Field(min_length=1)

    @field_validator("price", "rating", "availableQuantity")
    @classmethod
    def _non_zero(cls, value):
        if not value:
            raise ValueError("must be non-zero")
        return value


class ToyUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    price: Optional[float] = None
    availableQuantity: Optional[int | float] = None
    detailDescription: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        """Only the mutable fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


def parse_toy_id(value: str) -> ObjectId | None:
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)
