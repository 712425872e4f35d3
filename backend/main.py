"""Fish Location Log — FastAPI backend."""
import logging

from fastapi import FastAPI

# Show store and persistence messages (INFO level)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logging.getLogger("fishlog_core").setLevel(logging.INFO)
from fastapi.middleware.cors import CORSMiddleware

from api.locations import router as locations_router
from api.routes import router
from api.stats import router as stats_router
from db import SessionLocal, init_db
from fishlog_core.persistence import BlobPersistence
from fishlog_core.store import LocationStore
from utils.config import LOCATIONS_KEY

app = FastAPI(
    title="Fish Location Log",
    description="Personal log of fishing locations and visits",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8080", "http://127.0.0.1:8080"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")
app.include_router(locations_router, prefix="/api")
app.include_router(stats_router, prefix="/api")


@app.on_event("startup")
def startup() -> None:
    """Create the blob table and load the persisted log into the store."""
    init_db()
    store = LocationStore(BlobPersistence(SessionLocal, LOCATIONS_KEY))
    store.load()
    app.state.store = store


@app.on_event("shutdown")
def shutdown() -> None:
    store = getattr(app.state, "store", None)
    if store is not None:
        store.close()


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "fish-location-log", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run(app, host="127.0.0.1", port=PORT)
