from datetime import date

import streamlit as st

from sms_portal.auth import get_api_client
from sms_portal.permissions import can_create_edit_batches, can_delete_batches
from sms_portal.role_guard import guard_page
from sms_portal.schemas.batch import BatchCreate, BatchUpdate, Semester
from sms_portal.services.batches import BatchService
from sms_portal.services.programmes import ProgrammeService
from sms_portal.ui import (
    confirm_delete,
    load,
    number_bounds,
    options_by_label,
    render_table,
    run_action,
    show_flashes,
    validate_form,
)

profile = guard_page()
show_flashes()

client = get_api_client()
service = BatchService(client)
can_create_edit = can_create_edit_batches(profile)
can_delete = can_delete_batches(profile)

SEMESTERS = [s.value for s in Semester]

st.title("🗂️ Batches")
st.markdown("Student intakes per programme, identified by start year and semester.")
st.divider()

# ===========================
# CREATE
# ===========================
if can_create_edit:
    programmes = load(ProgrammeService(client).list_programmes, "Failed to load programmes")
    active = [p for p in programmes if p.is_active]
    programme_by_name = {
        label: p.programme_id
        for label, p in options_by_label(active, lambda p: p.programme_name, lambda p: p.programme_id).items()
    }

    with st.expander("➕ Add Batch"):
        with st.form("add_batch"):
            programme_name = st.selectbox("Programme", options=list(programme_by_name), index=None)
            batch_name = st.text_input("Batch Name", placeholder="e.g. CSE 2025", key="new_batch_name")
            c1, c2 = st.columns(2)
            with c1:
                start_year = st.number_input("Start Year", min_value=2000, max_value=2100,
                                             value=date.today().year, step=1, key="new_start_year")
            with c2:
                start_semester = st.selectbox("Start Semester", SEMESTERS, index=None, key="new_start_semester")
            submitted = st.form_submit_button("Create Batch", type="primary")

        if submitted:
            if not programme_name or not batch_name.strip() or not start_year or not start_semester:
                st.error("Please fill in all required fields")
            else:
                form = validate_form(
                    BatchCreate,
                    programme_id=programme_by_name[programme_name],
                    batch_name=batch_name,
                    start_year=int(start_year),
                    start_semester=start_semester,
                )
                if form:
                    run_action(
                        lambda: service.create_batch(form),
                        "Batch created successfully",
                        "Failed to create batch",
                    )

# ===========================
# LIST
# ===========================
batches = load(service.list_batches, "Failed to load batches")

st.subheader(f"Batches ({len(batches)})")
render_table(
    batches,
    {
        "batch_name": "Batch",
        "programme_name": "Programme",
        "start_year": "Start Year",
        "start_semester": "Semester",
        "department_code": "Department",
        "is_active": "Active",
    },
    empty="No batches found.",
)

# ===========================
# EDIT / DELETE
# ===========================
if (can_create_edit or can_delete) and batches:
    st.divider()
    st.subheader("Manage Batch")

    by_label = options_by_label(
        batches, lambda b: f"{b.batch_name} ({b.start_semester.value} {b.start_year})", lambda b: b.batch_id
    )
    selected = by_label[st.selectbox("Batch", options=list(by_label))]
    year_low, year_high = number_bounds(selected.start_year, 2000, 2100)

    edit_col, delete_col = st.columns([3, 1])

    if can_create_edit:
        with edit_col:
            with st.form(f"edit_batch_{selected.batch_id}"):
                batch_name = st.text_input("Batch Name", value=selected.batch_name)
                c1, c2 = st.columns(2)
                with c1:
                    start_year = st.number_input("Start Year", min_value=year_low, max_value=year_high,
                                                 value=selected.start_year, step=1)
                with c2:
                    start_semester = st.selectbox("Start Semester", SEMESTERS,
                                                  index=SEMESTERS.index(selected.start_semester.value))
                is_active = st.checkbox("Active", value=selected.is_active)
                submitted = st.form_submit_button("Save Changes")

            if submitted:
                form = validate_form(
                    BatchUpdate,
                    batch_name=batch_name,
                    start_year=int(start_year) if start_year else None,
                    start_semester=start_semester or None,
                    is_active=is_active,
                )
                if form:
                    run_action(
                        lambda: service.update_batch(selected.batch_id, form),
                        "Batch updated successfully",
                        "Failed to update batch",
                    )

    if can_delete:
        with delete_col:
            if confirm_delete(f"batch_{selected.batch_id}", selected.batch_name):
                run_action(
                    lambda: service.delete_batch(selected.batch_id),
                    "Batch deleted successfully",
                    "Failed to delete batch",
                )
