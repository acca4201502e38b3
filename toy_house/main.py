import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from toy_house.api.router import api_router
from toy_house.config import settings
from toy_house.database.mongo import ToyDatabase

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = ToyDatabase(settings.mongo_uri, settings.MONGO_DB, settings.MONGO_COLLECTION)
    await database.connect()
    app.state.database = database
    try:
        yield
    finally:
        database.close()


async def invalid_request_handler(request: Request, exc: RequestValidationError):
    logger.debug("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse({"error": "Invalid request body."}, status_code=400)


def create_app() -> FastAPI:
    app = FastAPI(title="Toy House API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, invalid_request_handler)

    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Toy House is running"

    return app


app = create_app()


def run():
    logger.info(f"Toy House server is running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
