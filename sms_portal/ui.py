import logging

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from sms_portal.api import ApiError, extract_error_message
from sms_portal.schemas.common import format_validation_errors

logger = logging.getLogger(__name__)

FLASH_KEY = "flash_messages"


# ---------------------------
# TOASTS
# ---------------------------
def queue_toast(message: str, icon: str = "✅") -> None:
    """Toast shown on the next run, so it survives the st.rerun() after a mutation."""
    st.session_state.setdefault(FLASH_KEY, []).append((message, icon))


def show_flashes() -> None:
    for message, icon in st.session_state.pop(FLASH_KEY, []):
        st.toast(message, icon=icon)


# ---------------------------
# FORMS / ACTIONS
# ---------------------------
def validate_form(model, **values):
    """Build a form model, or show each validation message and return None."""
    try:
        return model(**values)
    except ValidationError as exc:
        for message in format_validation_errors(exc):
            st.error(message)
        return None


def run_action(action, success: str, failure: str) -> bool:
    """
    Run a service call. On success queue a toast and rerun (which re-fetches lists);
    on failure show the best message the backend gave us.
    """
    try:
        with st.spinner():
            action()
    except ApiError as exc:
        st.error(extract_error_message(exc, failure))
        return False

    queue_toast(success)
    st.rerun()
    return True


def load(fetch, failure: str, default=None):
    """Fetch data for a page; show the error and fall back to default when it fails."""
    try:
        return fetch()
    except ApiError as exc:
        st.error(extract_error_message(exc, failure))
        return [] if default is None else default


def options_by_label(items, label, ident) -> dict:
    """Selectbox options; the id keeps records with the same name apart."""
    return {f"{label(item)} (#{ident(item)})": item for item in items}


def number_bounds(value, low: int, high: int):
    """Widen (low, high) so a stored value outside it can still seed st.number_input."""
    if value is None:
        return low, high
    return min(low, value), max(high, value)


def confirm_delete(key: str, label: str) -> bool:
    """Two-step delete: first click arms, second confirms."""
    armed_key = f"confirm_{key}"
    if not st.session_state.get(armed_key):
        if st.button("🗑️ Delete", key=f"delete_{key}"):
            st.session_state[armed_key] = True
            st.rerun()
        return False

    st.warning(f"Delete {label}? This cannot be undone.")
    yes, no = st.columns(2)
    with yes:
        confirmed = st.button("Yes, delete", key=f"yes_{key}", type="primary")
    with no:
        if st.button("Cancel", key=f"no_{key}"):
            st.session_state.pop(armed_key, None)
            st.rerun()
    if confirmed:
        st.session_state.pop(armed_key, None)
    return confirmed


# ---------------------------
# TABLES
# ---------------------------
def to_frame(items, columns: dict, placeholders: dict = None) -> pd.DataFrame:
    """Models -> DataFrame with the given column order and display names; placeholders fill empty cells."""
    rows = [item.model_dump(mode="json") for item in items]
    df = pd.DataFrame(rows, columns=list(columns))
    if "is_active" in df.columns:
        df["is_active"] = df["is_active"].map({True: "Yes", False: "No"})
    for column, value in (placeholders or {}).items():
        if column in df.columns:
            df[column] = df[column].fillna(value)
    return df.rename(columns=columns)


def render_table(items, columns: dict, empty: str = "Nothing to show yet.", placeholders: dict = None) -> None:
    if not items:
        st.info(empty)
        return
    st.dataframe(to_frame(items, columns, placeholders), use_container_width=True, hide_index=True)
