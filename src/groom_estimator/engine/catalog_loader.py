"""Catalog loading — read ``breeds.json`` and ``addons.json`` once at startup.

Source is either a local directory or an ``http(s)://`` base URL that
serves both files.  Both resources must load and validate; there is no
partial-data mode.  Any failure surfaces as ``CatalogLoadError``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests
from pydantic import ValidationError

from groom_estimator.config.catalog import Catalog

logger = logging.getLogger(__name__)

BREEDS_FILE = "breeds.json"
ADDONS_FILE = "addons.json"


class CatalogLoadError(RuntimeError):
    """The catalog could not be fetched, parsed or validated."""


def bundled_data_dir() -> Path:
    """Directory of the sample catalog shipped with the package."""
    return Path(__file__).resolve().parent.parent / "data"


def load_catalog(source: str | Path | None = None, timeout: float = 10.0) -> Catalog:
    """Load and validate the breed and add-on catalog.

    Parameters
    ----------
    source : str | Path | None
        Directory containing both JSON files, or a base URL serving them.
        None loads the bundled sample catalog.
    timeout : float
        Per-request timeout (seconds) for URL sources.

    Raises
    ------
    CatalogLoadError
        If either resource is missing, unreachable, not JSON, or malformed.
    """
    if source is None:
        source = bundled_data_dir()

    breeds = _read_resource(source, BREEDS_FILE, timeout)
    addons = _read_resource(source, ADDONS_FILE, timeout)

    try:
        catalog = Catalog.model_validate({"breeds": breeds, "addons": addons})
    except ValidationError as exc:
        raise CatalogLoadError(f"Malformed catalog data from {source}: {exc}") from exc

    logger.info(
        "Loaded %d breeds and %d add-ons from %s",
        len(catalog.breeds), len(catalog.addons), source,
    )
    return catalog


def _is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _read_resource(source: str | Path, name: str, timeout: float) -> Any:
    """Fetch one JSON resource from a directory or base URL."""
    if _is_url(source):
        url = f"{str(source).rstrip('/')}/{name}"
        try:
            response = requests.get(url, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            raise CatalogLoadError(f"Could not fetch {url}: {exc}") from exc

    path = Path(source) / name
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Could not read {path}: {exc}") from exc
