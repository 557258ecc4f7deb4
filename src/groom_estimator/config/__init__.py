"""Configuration models — catalog data, inquiry wording, runtime settings."""

from groom_estimator.config.catalog import AddonEntry, BreedPriceEntry, Catalog
from groom_estimator.config.inquiry import DEFAULT_SERVICE_LABELS, InquiryConfig
from groom_estimator.config.settings import Settings

__all__ = [
    "AddonEntry",
    "BreedPriceEntry",
    "Catalog",
    "DEFAULT_SERVICE_LABELS",
    "InquiryConfig",
    "Settings",
]
