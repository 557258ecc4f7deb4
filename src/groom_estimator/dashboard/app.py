"""Grooming Estimator — Streamlit page.

Layout: breed + service pickers, add-on tags, notes, running total,
and an inquiry button that opens a pre-filled email.

Run with:
    streamlit run src/groom_estimator/dashboard/app.py

Every widget callback maps to one named Estimator operation; this page
never prices anything itself.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from groom_estimator.config import Catalog, Settings
from groom_estimator.engine.catalog_loader import CatalogLoadError, load_catalog
from groom_estimator.engine.estimator import Estimator
from groom_estimator.engine.formatting import format_addon_tag

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Grooming Estimator", page_icon="🐾", layout="centered")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    border: 1px solid rgba(128,128,128,0.25);
    border-radius: 10px;
    padding: 12px 16px;
}
</style>
""", unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Catalog + session estimator
# ---------------------------------------------------------------------------
@st.cache_resource
def _load_catalog(source: str | None, timeout: float) -> Catalog:
    return load_catalog(source, timeout=timeout)


settings = Settings.from_env()

try:
    catalog = _load_catalog(settings.catalog_source, settings.fetch_timeout_s)
except CatalogLoadError as exc:
    st.error(f"The price list could not be loaded. {exc}")
    st.stop()

if "estimator" not in st.session_state:
    st.session_state["estimator"] = Estimator(catalog, settings.inquiry)
estimator: Estimator = st.session_state["estimator"]


def _on_breed() -> None:
    estimator.select_breed(st.session_state["breed"])


def _on_service() -> None:
    estimator.select_service(st.session_state["service"])


def _on_addon(name: str) -> None:
    estimator.toggle_addon(name)


def _on_notes() -> None:
    estimator.set_notes(st.session_state["notes"])


# ---------------------------------------------------------------------------
# Selections
# ---------------------------------------------------------------------------
st.title("Grooming Estimate")
st.caption("Pick your dog's breed and a service to see an estimated price.")

labels = settings.inquiry.service_labels

col_breed, col_service = st.columns(2)
with col_breed:
    st.selectbox(
        "Breed",
        [""] + catalog.breed_names(),
        format_func=lambda b: b or "Select a breed",
        key="breed",
        on_change=_on_breed,
    )
with col_service:
    st.selectbox(
        "Service",
        [""] + list(labels),
        format_func=lambda s: labels.get(s, "Select a service"),
        key="service",
        on_change=_on_service,
    )

st.markdown("**Add‑ons**")
addon_cols = st.columns(2)
for i, entry in enumerate(catalog.addons):
    with addon_cols[i % 2]:
        st.checkbox(
            format_addon_tag(entry, settings.inquiry.currency_symbol),
            key=f"addon::{entry.addon}",
            on_change=_on_addon,
            args=(entry.addon,),
        )

st.text_area("Notes", key="notes", on_change=_on_notes,
             placeholder="Temperament, matting, preferred dates…")

# ---------------------------------------------------------------------------
# Total
# ---------------------------------------------------------------------------
total = estimator.last_total
st.metric("Estimated total", estimator.quote_text)
if total.available:
    st.caption(
        f"Base {settings.inquiry.currency_symbol}{total.base_price:.2f} + "
        f"add-ons {settings.inquiry.currency_symbol}{total.addon_total:.2f}"
    )
else:
    st.caption("Select a breed and a service offered for it to see a price.")

with st.expander("Full price list"):
    table = pd.DataFrame(
        [
            {"Breed": entry.breed, **{labels.get(k, k): v for k, v in entry.prices.items()}}
            for entry in catalog.breeds
        ]
    ).set_index("Breed")
    st.dataframe(table, use_container_width=True)

# ---------------------------------------------------------------------------
# Inquiry
# ---------------------------------------------------------------------------
st.markdown("---")
if st.button("Request this estimate", type="primary"):
    draft = estimator.submit()
    st.code(draft.body, language=None)
    st.link_button(f"Email {draft.recipient}", draft.url)
