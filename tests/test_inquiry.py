"""Tests for engine/inquiry.py — line composition and mailto encoding."""

from __future__ import annotations

from groom_estimator.config import InquiryConfig
from groom_estimator.engine.inquiry import build_inquiry, compose_mailto, service_label
from groom_estimator.models.results import Inquiry, SelectionState


def test_service_labels(inquiry_config: InquiryConfig):
    assert service_label("bath_brush", inquiry_config) == "Bath & Brush"
    assert service_label("bath_tidy", inquiry_config) == "Bath & Tidy"
    assert service_label("cut_style", inquiry_config) == "Cut & Style"


def test_unknown_service_uses_placeholder(inquiry_config: InquiryConfig):
    assert service_label("", inquiry_config) == "Not selected"
    assert service_label("spa_day", inquiry_config) == "Not selected"


def test_full_inquiry_order(inquiry_config: InquiryConfig):
    sel = SelectionState(
        breed="Shih Tzu",
        service="bath_tidy",
        addons=["Nail Trim", "Ear Cleaning"],
        notes="  Prefers mornings \n",
    )
    inquiry = build_inquiry(sel, "$73.00", inquiry_config)
    assert inquiry.lines == [
        "Breed: Shih Tzu",
        "Service: Bath & Tidy",
        "Add‑ons: Nail Trim, Ear Cleaning",
        "Notes: Prefers mornings",
        "Quote: $73.00",
    ]


def test_empty_selection_inquiry(inquiry_config: InquiryConfig):
    inquiry = build_inquiry(SelectionState(), "N/A", inquiry_config)
    assert inquiry.lines == ["Breed: ", "Service: Not selected", "Quote: N/A"]


def test_notes_line_without_addons(inquiry_config: InquiryConfig):
    sel = SelectionState(breed="Maltese", service="cut_style", notes="Short on the ears")
    lines = build_inquiry(sel, "$70.00", inquiry_config).lines
    assert "Notes: Short on the ears" in lines
    assert not any(line.startswith("Add‑ons") for line in lines)


def test_mailto_encodes_like_uri_component():
    config = InquiryConfig(recipient="desk@example.com", subject="Grooming Estimate Request")
    draft = compose_mailto(Inquiry(lines=["Breed: Poodle", "Service: Bath & Brush", "Add‑ons: Paw Balm (x1)"]), config)
    assert draft.url == (
        "mailto:desk@example.com"
        "?subject=Grooming%20Estimate%20Request"
        "&body=Breed%3A%20Poodle%0AService%3A%20Bath%20%26%20Brush"
        "%0AAdd%E2%80%91ons%3A%20Paw%20Balm%20(x1)"
    )
    assert draft.body == "Breed: Poodle\nService: Bath & Brush\nAdd‑ons: Paw Balm (x1)"
