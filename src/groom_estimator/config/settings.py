"""Runtime settings — environment overrides for the API and dashboard.

Every setting can be overridden by an environment variable:

    GROOM_ESTIMATOR_CATALOG    directory or http(s) base URL holding
                               breeds.json and addons.json
    GROOM_ESTIMATOR_RECIPIENT  inquiry email recipient
    GROOM_ESTIMATOR_SUBJECT    inquiry email subject
    GROOM_ESTIMATOR_TIMEOUT    catalog fetch timeout (seconds)
    GROOM_ESTIMATOR_LOG_LEVEL  logging level name
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from groom_estimator.config.inquiry import InquiryConfig


class Settings(BaseModel):
    """Process-level configuration."""

    catalog_source: str | None = Field(
        default=None,
        description="Catalog directory or base URL. None = bundled sample catalog.",
    )
    fetch_timeout_s: float = Field(default=10.0, gt=0, description="HTTP timeout for catalog fetches")
    log_level: str = Field(default="INFO", description="Root logging level")
    inquiry: InquiryConfig = Field(default_factory=InquiryConfig)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``GROOM_ESTIMATOR_*`` environment variables."""
        defaults = InquiryConfig()
        inquiry = InquiryConfig(
            recipient=os.getenv("GROOM_ESTIMATOR_RECIPIENT", defaults.recipient),
            subject=os.getenv("GROOM_ESTIMATOR_SUBJECT", defaults.subject),
        )
        return cls(
            catalog_source=os.getenv("GROOM_ESTIMATOR_CATALOG") or None,
            fetch_timeout_s=float(os.getenv("GROOM_ESTIMATOR_TIMEOUT", "10")),
            log_level=os.getenv("GROOM_ESTIMATOR_LOG_LEVEL", "INFO").upper(),
            inquiry=inquiry,
        )
