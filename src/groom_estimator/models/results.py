"""Result models — selection state, totals, inquiry and mail draft contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# Selection state
# ═══════════════════════════════════════════════════════════════════════════

class SelectionState(BaseModel):
    """What the customer has picked so far.

    Owned by one ``Estimator``; mutated only through its operations.
    """

    breed: str = ""
    """Selected breed name, or empty."""

    service: str = ""
    """Selected service key (e.g. ``bath_brush``), or empty."""

    addons: list[str] = Field(default_factory=list)
    """Selected add-on names, unique, in the order they were picked."""

    notes: str = ""
    """Free-form notes for the groomer."""


# ═══════════════════════════════════════════════════════════════════════════
# Pricing output
# ═══════════════════════════════════════════════════════════════════════════

class TotalResult(BaseModel):
    """Estimated total for the current selection.

    ``amount`` is ``None`` exactly when ``available`` is False, i.e. the
    breed/service pair has no base price.
    """

    available: bool
    amount: float | None = None
    base_price: float = Field(default=0.0, ge=0, description="Breed/service base price (0 = none)")
    addon_total: float = Field(default=0.0, ge=0, description="Sum of selected add-on prices")


# ═══════════════════════════════════════════════════════════════════════════
# Inquiry output
# ═══════════════════════════════════════════════════════════════════════════

class Inquiry(BaseModel):
    """Plain ordered text lines of an estimate request."""

    lines: list[str] = Field(default_factory=list)

    @property
    def body(self) -> str:
        return "\n".join(self.lines)


class MailtoDraft(BaseModel):
    """A pre-filled email handed to the user's mail client."""

    recipient: str
    subject: str
    body: str
    url: str = Field(description="mailto: URI with percent-encoded subject and body")
