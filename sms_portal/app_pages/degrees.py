import streamlit as st

from sms_portal.auth import get_api_client
from sms_portal.permissions import can_manage_degrees
from sms_portal.role_guard import guard_page
from sms_portal.schemas.degree import DegreeForm
from sms_portal.schemas.user import Role
from sms_portal.services.degrees import DegreeService
from sms_portal.ui import confirm_delete, load, options_by_label, render_table, run_action, show_flashes, validate_form

profile = guard_page([Role.ADMIN])
show_flashes()

service = DegreeService(get_api_client())
can_manage = can_manage_degrees(profile)

st.title("🎓 Degree Levels")
st.markdown("Degree levels (e.g. B.Tech, M.Tech, PhD) that programmes are offered under.")
st.divider()

if can_manage:
    with st.expander("➕ Add Degree Level"):
        with st.form("add_degree"):
            level_name = st.text_input("Level Name", placeholder="e.g. B.Tech", key="new_level_name")
            submitted = st.form_submit_button("Create", type="primary")

        if submitted:
            form = validate_form(DegreeForm, level_name=level_name)
            if form:
                run_action(
                    lambda: service.create_degree(form),
                    "Degree level created successfully",
                    "Failed to create degree level",
                )

degrees = load(service.list_degrees, "Failed to fetch degree levels")

st.subheader(f"Degree Levels ({len(degrees)})")
render_table(
    degrees,
    {"degree_level_id": "ID", "level_name": "Level Name"},
    empty="No degree levels found.",
)

if can_manage and degrees:
    st.divider()
    st.subheader("Manage Degree Level")

    by_label = options_by_label(degrees, lambda d: d.level_name, lambda d: d.degree_level_id)
    selected = by_label[st.selectbox("Degree Level", options=list(by_label))]

    edit_col, delete_col = st.columns([3, 1])

    with edit_col:
        with st.form(f"edit_degree_{selected.degree_level_id}"):
            level_name = st.text_input("Level Name", value=selected.level_name)
            submitted = st.form_submit_button("Save Changes")

        if submitted:
            form = validate_form(DegreeForm, level_name=level_name)
            if form:
                run_action(
                    lambda: service.update_degree(selected.degree_level_id, form),
                    "Degree level updated successfully",
                    "Failed to update degree level",
                )

    with delete_col:
        if confirm_delete(f"degree_{selected.degree_level_id}", selected.level_name):
            run_action(
                lambda: service.delete_degree(selected.degree_level_id),
                "Degree level deleted successfully",
                "Failed to delete degree level",
            )
