"""Display text for totals and add-on tags."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from groom_estimator.config.catalog import AddonEntry
from groom_estimator.models.results import TotalResult

UNAVAILABLE_TEXT = "N/A"
DISPLAY_PREFIX = "Estimated total: "

_CENTS = Decimal("0.01")

# Beyond this magnitude browsers print numbers in exponent form.
_PLAIN_LIMIT = 1e21


def format_quote(total: TotalResult, currency_symbol: str = "$") -> str:
    """``"$55.00"`` for an available total, ``"N/A"`` otherwise.

    Exact ties round up (40.125 → 40.13), as a browser's ``toFixed(2)`` does.
    """
    if not total.available or total.amount is None:
        return UNAVAILABLE_TEXT
    cents = Decimal(total.amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{currency_symbol}{cents}"


def format_display(total: TotalResult, currency_symbol: str = "$") -> str:
    return DISPLAY_PREFIX + format_quote(total, currency_symbol)


def format_addon_tag(entry: AddonEntry, currency_symbol: str = "$") -> str:
    """Selectable tag text, e.g. ``"Nail Trim (+$10)"``."""
    return f"{entry.addon} (+{currency_symbol}{_plain_number(entry.price)})"


def _plain_number(value: float) -> str:
    """10.0 → "10", 12.5 → "12.5", 1e16 → "10000000000000000"."""
    value = float(value)
    if abs(value) >= _PLAIN_LIMIT:
        return repr(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
