"""FastAPI server — grooming estimate API.

Run with:
    uvicorn groom_estimator.api.server:app --reload --port 8000

Or:
    python -m groom_estimator.api.server

Endpoints:
    GET  /health    — liveness probe
    GET  /catalog   — breeds, add-ons and service labels
    POST /estimate  — price a selection and compose the inquiry email

The server keeps no customer state: every /estimate request replays its
selections through a fresh Estimator built on the shared catalog.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from groom_estimator.config.catalog import AddonEntry, BreedPriceEntry, Catalog
from groom_estimator.config.settings import Settings
from groom_estimator.engine.catalog_loader import load_catalog
from groom_estimator.engine.estimator import Estimator
from groom_estimator.models.results import MailtoDraft, TotalResult

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

def configure_logging(level: str = "INFO") -> None:
    """Root handler plus level; the level is applied even if handlers exist."""
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(numeric)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Runs in the serving process, including uvicorn's reload worker.
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Grooming Estimator API",
    version="1.0",
    description=(
        "Price a grooming visit from breed, service tier and add-ons, and get "
        "a pre-filled inquiry email for the front desk."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Dependencies
# ═══════════════════════════════════════════════════════════════════════════

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def _cached_catalog(source: str | None, timeout: float) -> Catalog:
    return load_catalog(source, timeout=timeout)


def get_catalog(settings: Settings = Depends(get_settings)) -> Catalog:
    """Catalog loaded once per process; load failures propagate."""
    return _cached_catalog(settings.catalog_source, settings.fetch_timeout_s)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class EstimateRequest(BaseModel):
    """Customer selections.  All fields optional."""
    breed: str = Field(default="", description="Breed name as listed in /catalog")
    service: str = Field(default="", description="Service key, e.g. 'bath_brush'")
    addons: list[str] = Field(
        default_factory=list,
        description="Add-on names, toggled in order (listing a name twice deselects it)",
    )
    notes: str = Field(default="", description="Free-form notes for the groomer")


class EstimateResponse(BaseModel):
    """Priced selection plus the inquiry it would send."""
    total: TotalResult
    display_text: str
    selected_addons: list[str]
    inquiry_lines: list[str]
    mailto: MailtoDraft


class CatalogResponse(BaseModel):
    breeds: list[BreedPriceEntry]
    addons: list[AddonEntry]
    services: dict[str, str]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _replay(req: EstimateRequest, catalog: Catalog, settings: Settings) -> Estimator:
    """Drive a fresh Estimator through the request's selections."""
    estimator = Estimator(catalog, settings.inquiry)
    estimator.select_breed(req.breed)
    estimator.select_service(req.service)
    for addon in req.addons:
        estimator.toggle_addon(addon)
    estimator.set_notes(req.notes)
    return estimator


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name and pointers."""
    return {
        "name": "Grooming Estimator API",
        "version": "1.0",
        "start_here": "GET /catalog",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/catalog", response_model=CatalogResponse)
def get_catalog_view(
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Breeds with their service prices, add-ons, and service display labels."""
    return CatalogResponse(
        breeds=catalog.breeds,
        addons=catalog.addons,
        services=settings.inquiry.service_labels,
    )


@app.post("/estimate", response_model=EstimateResponse)
def estimate(
    req: EstimateRequest,
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Price a selection.

    Unknown breeds or services are not errors: the total comes back with
    ``available: false`` and the display text reads ``N/A``.

    Example request:
    ```json
    {"breed": "Poodle", "service": "bath_brush", "addons": ["Nail Trim"]}
    ```
    """
    estimator = _replay(req, catalog, settings)
    draft = estimator.submit()
    return EstimateResponse(
        total=estimator.last_total,
        display_text=estimator.display_text,
        selected_addons=estimator.selection.addons,
        inquiry_lines=estimator.build_inquiry().lines,
        mailto=draft,
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    # Fail fast: the API is unusable until the catalog has loaded.
    get_catalog(settings)
    uvicorn.run(
        "groom_estimator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
