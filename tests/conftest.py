"""Shared test fixtures — a small catalog with known prices."""

from __future__ import annotations

import pytest

from groom_estimator.config import AddonEntry, BreedPriceEntry, Catalog, InquiryConfig
from groom_estimator.engine.estimator import Estimator


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        breeds=[
            BreedPriceEntry(breed="Poodle", prices={"bath_brush": 45, "bath_tidy": 60, "cut_style": 80}),
            BreedPriceEntry(breed="Beagle", prices={"bath_brush": 40, "cut_style": None}),
            BreedPriceEntry(breed="Labrador Retriever", prices={"bath_brush": 60, "bath_tidy": 75}),
            BreedPriceEntry(breed="Puppy Intro", prices={"bath_brush": 0}),
            BreedPriceEntry(breed="Mystery Mutt"),
        ],
        addons=[
            AddonEntry(addon="Nail Trim", prices=[10]),
            AddonEntry(addon="Teeth Brushing", prices=[12.5]),
            AddonEntry(addon="Blueberry Facial", prices=[12, 15, 18]),
            AddonEntry(addon="Paw Balm"),
        ],
    )


@pytest.fixture
def inquiry_config() -> InquiryConfig:
    return InquiryConfig()


@pytest.fixture
def estimator(catalog: Catalog, inquiry_config: InquiryConfig) -> Estimator:
    return Estimator(catalog, inquiry_config)
