"""Tests for config/settings.py — environment overrides."""

from __future__ import annotations

from groom_estimator.config import Settings


def test_defaults(monkeypatch):
    for name in ["CATALOG", "RECIPIENT", "SUBJECT", "TIMEOUT", "LOG_LEVEL"]:
        monkeypatch.delenv(f"GROOM_ESTIMATOR_{name}", raising=False)
    settings = Settings.from_env()
    assert settings.catalog_source is None
    assert settings.fetch_timeout_s == 10.0
    assert settings.log_level == "INFO"
    assert settings.inquiry.recipient == "reston@mollysdogcare.com"
    assert settings.inquiry.service_labels["cut_style"] == "Cut & Style"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GROOM_ESTIMATOR_CATALOG", "https://cdn.example.com/grooming")
    monkeypatch.setenv("GROOM_ESTIMATOR_RECIPIENT", "desk@example.com")
    monkeypatch.setenv("GROOM_ESTIMATOR_SUBJECT", "Estimate")
    monkeypatch.setenv("GROOM_ESTIMATOR_TIMEOUT", "2.5")
    monkeypatch.setenv("GROOM_ESTIMATOR_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.catalog_source == "https://cdn.example.com/grooming"
    assert settings.fetch_timeout_s == 2.5
    assert settings.log_level == "DEBUG"
    assert settings.inquiry.recipient == "desk@example.com"
    assert settings.inquiry.subject == "Estimate"


def test_blank_catalog_means_bundled(monkeypatch):
    monkeypatch.setenv("GROOM_ESTIMATOR_CATALOG", "")
    assert Settings.from_env().catalog_source is None
