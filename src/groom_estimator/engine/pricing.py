"""Estimate pricing — breed/service base price plus flat add-on prices.

Every lookup here is total: unknown breeds, services or add-ons never
raise, they contribute nothing.  A missing (or zero) base price marks the
whole estimate unavailable even though it sums as 0 internally.
"""

from __future__ import annotations

from collections.abc import Iterable

from groom_estimator.config.catalog import Catalog
from groom_estimator.models.results import SelectionState, TotalResult


def base_price(catalog: Catalog, breed: str, service: str) -> float:
    """Base price for ``service`` on ``breed``, or 0.0 when not offered."""
    entry = catalog.find_breed(breed)
    if entry is None:
        return 0.0
    price = entry.prices.get(service)
    return float(price) if price is not None else 0.0


def addon_price(catalog: Catalog, addon: str) -> float:
    """First-tier price of ``addon``, or 0.0 when it is not in the catalog."""
    entry = catalog.find_addon(addon)
    return float(entry.price) if entry is not None else 0.0


def addons_total(catalog: Catalog, addons: Iterable[str]) -> float:
    # Duplicates are collapsed so each add-on is charged at most once.
    return sum(addon_price(catalog, name) for name in dict.fromkeys(addons))


def compute_total(catalog: Catalog, selection: SelectionState) -> TotalResult:
    """Total for ``selection``.

    Steps:
      1. base = breed/service price (0 when the pair has none)
      2. add-ons = sum of first-tier prices of selected add-ons
      3. total = base + add-ons
      4. base == 0 → unavailable, whatever the add-on sum
    """
    base = base_price(catalog, selection.breed, selection.service)
    extras = addons_total(catalog, selection.addons)
    if base == 0:
        return TotalResult(available=False, amount=None, base_price=0.0, addon_total=extras)
    return TotalResult(available=True, amount=base + extras, base_price=base, addon_total=extras)
