"""Inquiry composition — estimate summary lines and the mailto draft."""

from __future__ import annotations

from urllib.parse import quote

from groom_estimator.config.inquiry import InquiryConfig
from groom_estimator.models.results import Inquiry, MailtoDraft, SelectionState

# Label written with U+2011 (non-breaking hyphen), matching the booking page.
ADDONS_LABEL = "Add‑ons"

# Characters encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def service_label(service: str, config: InquiryConfig) -> str:
    """Human-readable label for a service key, or the placeholder."""
    return config.service_labels.get(service, config.unknown_service_label)


def build_inquiry(selection: SelectionState, quote_text: str, config: InquiryConfig) -> Inquiry:
    """Compose the inquiry lines in their fixed order.

    ``Breed``, ``Service`` and ``Quote`` are always present; ``Add‑ons`` only
    when something is selected; ``Notes`` only when non-blank after trimming.
    ``quote_text`` is whatever total text is currently displayed.
    """
    lines = [
        f"Breed: {selection.breed}",
        f"Service: {service_label(selection.service, config)}",
    ]
    if selection.addons:
        lines.append(f"{ADDONS_LABEL}: {', '.join(selection.addons)}")
    notes = selection.notes.strip()
    if notes:
        lines.append(f"Notes: {notes}")
    lines.append(f"Quote: {quote_text}")
    return Inquiry(lines=lines)


def compose_mailto(inquiry: Inquiry, config: InquiryConfig) -> MailtoDraft:
    """Pre-filled email addressed to the front desk."""
    body = inquiry.body
    url = (
        f"mailto:{config.recipient}"
        f"?subject={quote(config.subject, safe=_URI_COMPONENT_SAFE)}"
        f"&body={quote(body, safe=_URI_COMPONENT_SAFE)}"
    )
    return MailtoDraft(recipient=config.recipient, subject=config.subject, body=body, url=url)
