from fastapi import APIRouter
from toy_house.api.routes import toys

api_router = APIRouter()

api_router.include_router(toys.router, tags=["Toys"])
