"""Inquiry settings — mail recipient, subject and service display labels."""

from pydantic import BaseModel, Field


DEFAULT_SERVICE_LABELS: dict[str, str] = {
    "bath_brush": "Bath & Brush",
    "bath_tidy": "Bath & Tidy",
    "cut_style": "Cut & Style",
}


class InquiryConfig(BaseModel):
    """How an estimate is worded and where the inquiry email goes."""

    recipient: str = Field(
        default="reston@mollysdogcare.com",
        description="Front-desk address the inquiry is addressed to",
    )
    subject: str = Field(default="Grooming Estimate Request", description="Email subject line")
    service_labels: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_SERVICE_LABELS),
        description="Service key → human-readable label",
    )
    unknown_service_label: str = Field(
        default="Not selected",
        description="Label written for an empty or unrecognised service key",
    )
    currency_symbol: str = Field(default="$", description="Prefix for formatted amounts")
