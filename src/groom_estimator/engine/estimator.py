"""Grooming estimator — one customer's selections and their running total.

The page (dashboard, API request) never prices anything itself; it calls
the named operations below and reads back ``display_text``:

  select_breed / select_service / toggle_addon  → total recomputed at once
  set_notes                                     → no effect on the total
  build_inquiry / submit                        → summary of current state
"""

from __future__ import annotations

import logging

from groom_estimator.config.catalog import Catalog
from groom_estimator.config.inquiry import InquiryConfig
from groom_estimator.engine.formatting import format_display, format_quote
from groom_estimator.engine.inquiry import build_inquiry, compose_mailto
from groom_estimator.engine.pricing import compute_total
from groom_estimator.models.results import Inquiry, MailtoDraft, SelectionState, TotalResult

logger = logging.getLogger(__name__)


class Estimator:
    """Owns a ``SelectionState`` and keeps its total in step with it.

    Usage::

        estimator = Estimator(load_catalog())
        estimator.select_breed("Poodle")
        estimator.select_service("bath_brush")
        estimator.toggle_addon("Nail Trim")
        estimator.display_text        # "Estimated total: $55.00"
        estimator.submit().url        # mailto:...?subject=...&body=...

    Parameters
    ----------
    catalog : Catalog
        Fully loaded breed and add-on catalog.  Treated as read-only.
    inquiry_config : InquiryConfig | None
        Recipient, subject and service labels.  Defaults apply when None.
    """

    def __init__(self, catalog: Catalog, inquiry_config: InquiryConfig | None = None) -> None:
        self._catalog = catalog
        self._config = inquiry_config or InquiryConfig()
        self._state = SelectionState()
        self._last_total = TotalResult(available=False)
        self._display_text = ""
        self._refresh()

    # -- read-only views ----------------------------------------------------

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def config(self) -> InquiryConfig:
        return self._config

    @property
    def selection(self) -> SelectionState:
        """Copy of the current selection (mutate through the operations)."""
        return self._state.model_copy(deep=True)

    @property
    def last_total(self) -> TotalResult:
        """Total as of the most recent mutation."""
        return self._last_total

    @property
    def display_text(self) -> str:
        """``"Estimated total: $55.00"`` or ``"Estimated total: N/A"``."""
        return self._display_text

    @property
    def quote_text(self) -> str:
        return format_quote(self._last_total, self._config.currency_symbol)

    def is_addon_selected(self, addon: str) -> bool:
        return addon in self._state.addons

    # -- mutations ------------------------------------------------------------

    def select_breed(self, breed: str) -> TotalResult:
        self._state.breed = breed
        logger.debug("Breed selected: %r", breed)
        return self._refresh()

    def select_service(self, service: str) -> TotalResult:
        self._state.service = service
        logger.debug("Service selected: %r", service)
        return self._refresh()

    def toggle_addon(self, addon: str) -> TotalResult:
        """Add ``addon`` if absent, remove it if present.

        Names not in the add-on catalog are ignored.
        """
        if self._catalog.find_addon(addon) is None:
            logger.debug("Ignoring unknown add-on %r", addon)
            return self._last_total
        if addon in self._state.addons:
            self._state.addons.remove(addon)
        else:
            self._state.addons.append(addon)
        logger.debug("Add-ons now: %s", self._state.addons)
        return self._refresh()

    def set_notes(self, notes: str) -> None:
        self._state.notes = notes

    # -- totals and output ----------------------------------------------------

    def compute_total(self) -> TotalResult:
        """Price the current selection without touching the displayed text."""
        return compute_total(self._catalog, self._state)

    def build_inquiry(self) -> Inquiry:
        """Inquiry lines quoting the currently displayed total."""
        return build_inquiry(self._state, self.quote_text, self._config)

    def submit(self) -> MailtoDraft:
        """Compose the inquiry email; opening it is up to the caller."""
        draft = compose_mailto(self.build_inquiry(), self._config)
        logger.info("Composed estimate inquiry for %s", draft.recipient)
        return draft

    def _refresh(self) -> TotalResult:
        self._last_total = self.compute_total()
        self._display_text = format_display(self._last_total, self._config.currency_symbol)
        return self._last_total
