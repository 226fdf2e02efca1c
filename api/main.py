"""
Word-list dataset API.

    GET  /datasets?q=<substring>   newest 50 summaries
    POST /datasets                 create a list
    GET  /datasets/{id}            full list including words

Every error response is ``{"error": "<message>"}``.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from core import dataset_repo, dataset_service
from core.errors import DatasetError, StorageUnavailable, ValidationError

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Something went wrong. Please try again later."


@asynccontextmanager
async def lifespan(_app: FastAPI):
    try:
        dataset_repo.ensure_indexes()
    except (PyMongoError, StorageUnavailable) as exc:
        logger.warning("Skipping index setup, database unavailable: %s", exc)
    yield
    dataset_repo.close_connection()


app = FastAPI(title="Vibe Learn Dataset API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("API_CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DatasetError)
async def dataset_error_handler(_request: Request, exc: DatasetError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse({"error": INTERNAL_ERROR}, status_code=500)


@app.get("/")
def read_root():
    return {"message": "Backend running", "docs": "/docs"}


@app.get("/health")
def health():
    response = {
        "backend": "running",
        "database": "unavailable",
        "database_name": dataset_repo.get_db_name(),
        "test_mode": dataset_repo.is_test_mode(),
    }
    try:
        response["datasets"] = dataset_repo.count_datasets()
        response["database"] = "connected"
    except (PyMongoError, StorageUnavailable) as exc:
        logger.warning("Health check failed: %s", exc)
    return response


@app.get("/datasets")
def list_datasets(q: Optional[str] = None):
    datasets = dataset_service.list_datasets(q)
    return {"datasets": [d.model_dump(by_alias=True, mode="json") for d in datasets]}


@app.post("/datasets")
async def create_dataset(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON.")
    dataset = await run_in_threadpool(dataset_service.create_dataset, payload)
    return {"dataset": dataset.model_dump(by_alias=True, mode="json")}


@app.get("/datasets/{dataset_id}")
def get_dataset(dataset_id: str):
    dataset = dataset_service.get_dataset(dataset_id)
    return {"dataset": dataset.model_dump(by_alias=True, mode="json")}


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
