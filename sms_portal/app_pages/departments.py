import streamlit as st

from sms_portal.auth import get_api_client
from sms_portal.permissions import can_manage_departments
from sms_portal.role_guard import guard_page
from sms_portal.schemas.department import DepartmentForm
from sms_portal.services.departments import DepartmentService, changed_fields
from sms_portal.ui import confirm_delete, load, render_table, run_action, show_flashes, validate_form

profile = guard_page()
show_flashes()

service = DepartmentService(get_api_client())
can_manage = can_manage_departments(profile)

st.title("🏛️ Departments")
st.markdown("Academic departments and their Heads of Department.")
st.divider()

# ===========================
# ADD DEPARTMENT
# ===========================
if can_manage:
    with st.expander("➕ Add Department"):
        with st.form("add_department", clear_on_submit=False):
            code = st.text_input("Department Code", placeholder="e.g. CSE", key="new_department_code")
            name = st.text_input("Department Name", placeholder="e.g. Computer Science and Engineering",
                                 key="new_department_name")
            hod_email = st.text_input("HOD Email", placeholder="hod@university.edu", key="new_hod_email")
            submitted = st.form_submit_button("Create Department", type="primary")

        if submitted:
            form = validate_form(DepartmentForm, department_code=code, department_name=name, hod_email=hod_email)
            if form:
                run_action(
                    lambda: service.create_department(form),
                    "Department created successfully!",
                    "Failed to create department",
                )

# ===========================
# DEPARTMENT LIST
# ===========================
departments = load(service.list_departments, "Failed to load departments")

st.subheader(f"All Departments ({len(departments)})")
render_table(
    departments,
    {
        "department_code": "Code",
        "department_name": "Name",
        "hod_name": "HOD",
        "hod_email": "HOD Email",
    },
    empty="No departments found.",
)

# ===========================
# EDIT / DELETE
# ===========================
if can_manage and departments:
    st.divider()
    st.subheader("Manage Department")

    by_label = {f"{d.department_code} · {d.department_name}": d for d in departments}
    selected = by_label[st.selectbox("Department", options=list(by_label))]

    edit_col, delete_col = st.columns([3, 1])

    with edit_col:
        with st.form(f"edit_department_{selected.department_id}"):
            code = st.text_input("Department Code", value=selected.department_code)
            name = st.text_input("Department Name", value=selected.department_name)
            hod_email = st.text_input("HOD Email", value=selected.hod_email or "")
            submitted = st.form_submit_button("Save Changes")

        if submitted:
            form = validate_form(DepartmentForm, department_code=code, department_name=name, hod_email=hod_email)
            if form:
                changes = changed_fields(selected, form)
                if not changes:
                    st.info("No changes detected")
                else:
                    run_action(
                        lambda: service.update_department(selected.department_id, changes),
                        f'Department "{form.department_code}" updated successfully!',
                        "Failed to update department",
                    )

    with delete_col:
        if confirm_delete(f"department_{selected.department_id}", selected.department_code):
            run_action(
                lambda: service.delete_department(selected.department_id),
                "Department deleted successfully!",
                "Failed to delete department",
            )
