"""Result models — estimator state and output contracts."""

from groom_estimator.models.results import (
    Inquiry,
    MailtoDraft,
    SelectionState,
    TotalResult,
)

__all__ = [
    "Inquiry",
    "MailtoDraft",
    "SelectionState",
    "TotalResult",
]
