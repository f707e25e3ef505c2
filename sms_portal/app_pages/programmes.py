import streamlit as st

from sms_portal.auth import get_api_client
from sms_portal.permissions import can_create_edit_programmes, can_delete_programmes
from sms_portal.role_guard import guard_page
from sms_portal.schemas.programme import ProgrammeCreate, ProgrammeUpdate
from sms_portal.services.degrees import DegreeService
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
service = ProgrammeService(client)
can_create_edit = can_create_edit_programmes(profile)
can_delete = can_delete_programmes(profile)

st.title("📚 Programmes")
st.markdown("Programmes offered by your department.")
st.divider()

# ===========================
# CREATE
# ===========================
if can_create_edit:
    degrees = load(DegreeService(client).list_degrees, "Failed to load degree levels")
    degree_by_name = {
        label: d.degree_level_id
        for label, d in options_by_label(degrees, lambda d: d.level_name, lambda d: d.degree_level_id).items()
    }

    with st.expander("➕ Add Programme"):
        with st.form("add_programme"):
            programme_name = st.text_input("Programme Name", placeholder="e.g. B.Tech in Computer Science",
                                           key="new_programme_name")
            degree_name = st.selectbox("Degree Level", options=list(degree_by_name), index=None)
            c1, c2 = st.columns(2)
            with c1:
                min_years = st.number_input("Minimum Duration (years)", min_value=1, max_value=10, value=None, step=1,
                                            key="new_min_years")
            with c2:
                max_years = st.number_input("Maximum Duration (years)", min_value=1, max_value=15, value=None, step=1,
                                            key="new_max_years")
            submitted = st.form_submit_button("Create Programme", type="primary")

        if submitted:
            if not programme_name.strip() or not degree_name or not min_years:
                st.error("Please fill in all required fields")
            else:
                form = validate_form(
                    ProgrammeCreate,
                    programme_name=programme_name,
                    degree_level_id=degree_by_name[degree_name],
                    minimum_duration_years=int(min_years),
                    maximum_duration_years=int(max_years) if max_years else None,
                )
                if form:
                    run_action(
                        lambda: service.create_programme(form),
                        "Programme created successfully",
                        "Failed to create programme",
                    )

# ===========================
# LIST
# ===========================
programmes = load(service.list_programmes, "Failed to load programmes")

st.subheader(f"Programmes ({len(programmes)})")
render_table(
    programmes,
    {
        "programme_name": "Programme",
        "degree_level": "Degree Level",
        "minimum_duration_years": "Min Years",
        "maximum_duration_years": "Max Years",
        "department_code": "Department",
        "is_active": "Active",
    },
    empty="No programmes found.",
)

# ===========================
# EDIT / DELETE
# ===========================
if (can_create_edit or can_delete) and programmes:
    st.divider()
    st.subheader("Manage Programme")

    by_label = options_by_label(
        programmes, lambda p: f"{p.programme_name} ({p.degree_level or '-'})", lambda p: p.programme_id
    )
    selected = by_label[st.selectbox("Programme", options=list(by_label))]
    min_low, min_high = number_bounds(selected.minimum_duration_years, 1, 10)
    max_low, max_high = number_bounds(selected.maximum_duration_years, 1, 15)

    edit_col, delete_col = st.columns([3, 1])

    if can_create_edit:
        with edit_col:
            with st.form(f"edit_programme_{selected.programme_id}"):
                programme_name = st.text_input("Programme Name", value=selected.programme_name)
                c1, c2 = st.columns(2)
                with c1:
                    min_years = st.number_input(
                        "Minimum Duration (years)", min_value=min_low, max_value=min_high,
                        value=selected.minimum_duration_years, step=1,
                    )
                with c2:
                    max_years = st.number_input(
                        "Maximum Duration (years)", min_value=max_low, max_value=max_high,
                        value=selected.maximum_duration_years, step=1,
                    )
                is_active = st.checkbox("Active", value=selected.is_active)
                submitted = st.form_submit_button("Save Changes")

            if submitted:
                form = validate_form(
                    ProgrammeUpdate,
                    programme_name=programme_name,
                    minimum_duration_years=int(min_years) if min_years else None,
                    maximum_duration_years=int(max_years) if max_years else None,
                    is_active=is_active,
                )
                if form:
                    run_action(
                        lambda: service.update_programme(selected.programme_id, form),
                        "Programme updated successfully",
                        "Failed to update programme",
                    )

    if can_delete:
        with delete_col:
            if confirm_delete(f"programme_{selected.programme_id}", selected.programme_name):
                run_action(
                    lambda: service.delete_programme(selected.programme_id),
                    "Programme deleted successfully",
                    "Failed to delete programme",
                )
