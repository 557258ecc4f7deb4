"""Tests for engine/pricing.py."""

from __future__ import annotations

import pytest

from groom_estimator.config import Catalog
from groom_estimator.engine.pricing import addon_price, addons_total, base_price, compute_total
from groom_estimator.models.results import SelectionState


# ═══════════════════════════════════════════════════════════════════════════
# Lookups
# ═══════════════════════════════════════════════════════════════════════════

def test_base_price_found(catalog: Catalog):
    assert base_price(catalog, "Poodle", "bath_brush") == 45


@pytest.mark.parametrize(
    "breed, service",
    [
        ("Unknown Mix", "cut_style"),        # breed not in catalog
        ("Labrador Retriever", "cut_style"),  # key omitted
        ("Beagle", "cut_style"),              # explicit null
        ("Mystery Mutt", "bath_brush"),       # entry without prices
        ("Poodle", ""),                       # no service chosen
        ("", ""),
    ],
)
def test_base_price_missing_is_zero(catalog: Catalog, breed: str, service: str):
    assert base_price(catalog, breed, service) == 0.0


def test_addon_price_uses_first_tier(catalog: Catalog):
    assert addon_price(catalog, "Blueberry Facial") == 12


def test_addon_price_unknown_or_untiered_is_zero(catalog: Catalog):
    assert addon_price(catalog, "Gold Plating") == 0.0
    assert addon_price(catalog, "Paw Balm") == 0.0


def test_addons_total_charges_each_once(catalog: Catalog):
    assert addons_total(catalog, ["Nail Trim", "Nail Trim", "Teeth Brushing"]) == 22.5


# ═══════════════════════════════════════════════════════════════════════════
# compute_total
# ═══════════════════════════════════════════════════════════════════════════

def test_total_is_base_plus_addons(catalog: Catalog):
    sel = SelectionState(breed="Poodle", service="cut_style",
                         addons=["Nail Trim", "Blueberry Facial", "Teeth Brushing"])
    total = compute_total(catalog, sel)
    assert total.available
    assert total.amount == pytest.approx(80 + 10 + 12 + 12.5)
    assert total.base_price == 80
    assert total.addon_total == pytest.approx(34.5)


def test_unknown_addon_contributes_nothing(catalog: Catalog):
    sel = SelectionState(breed="Poodle", service="bath_brush", addons=["Nail Trim", "Gold Plating"])
    assert compute_total(catalog, sel).amount == 55


def test_no_base_price_is_unavailable_regardless_of_addons(catalog: Catalog):
    for breed in ["Unknown Mix", "Labrador Retriever", "Beagle"]:
        sel = SelectionState(breed=breed, service="cut_style", addons=["Nail Trim", "Teeth Brushing"])
        total = compute_total(catalog, sel)
        assert not total.available
        assert total.amount is None
        assert total.addon_total == pytest.approx(22.5)


def test_zero_base_price_is_unavailable(catalog: Catalog):
    sel = SelectionState(breed="Puppy Intro", service="bath_brush", addons=["Nail Trim"])
    assert not compute_total(catalog, sel).available


def test_empty_selection_is_unavailable(catalog: Catalog):
    assert compute_total(catalog, SelectionState()).available is False
