"""Engine — pricing, display formatting, inquiry composition and the Estimator."""

from groom_estimator.engine.catalog_loader import CatalogLoadError, bundled_data_dir, load_catalog
from groom_estimator.engine.estimator import Estimator
from groom_estimator.engine.formatting import format_addon_tag, format_display, format_quote
from groom_estimator.engine.inquiry import build_inquiry, compose_mailto, service_label
from groom_estimator.engine.pricing import addon_price, addons_total, base_price, compute_total

__all__ = [
    "Estimator",
    "load_catalog",
    "bundled_data_dir",
    "CatalogLoadError",
    "base_price",
    "addon_price",
    "addons_total",
    "compute_total",
    "format_quote",
    "format_display",
    "format_addon_tag",
    "service_label",
    "build_inquiry",
    "compose_mailto",
]
