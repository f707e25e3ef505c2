import streamlit as st

from sms_portal.api import ApiError, extract_error_message
from sms_portal.auth import get_api_client
from sms_portal.permissions import can_create_edit_faculty, can_delete_faculty, can_update_faculty_profile
from sms_portal.role_guard import guard_page
from sms_portal.schemas.faculty import FacultyCreate, FacultyProfileUpdate, FacultyUpdate
from sms_portal.schemas.user import Role
from sms_portal.services.faculties import FacultyService
from sms_portal.ui import confirm_delete, load, queue_toast, render_table, run_action, show_flashes, validate_form

profile = guard_page([Role.HOD, Role.FACULTY])
show_flashes()

service = FacultyService(get_api_client())
can_create_edit = can_create_edit_faculty(profile)
can_delete = can_delete_faculty(profile)

st.title("🧑‍🏫 Faculty")
st.markdown("Faculty members of your department.")
st.divider()

# ===========================
# CREATE
# ===========================
if can_create_edit:
    with st.expander("➕ Add Faculty"):
        st.caption("The account is created with the email address as its initial password.")
        with st.form("add_faculty"):
            email = st.text_input("Email", placeholder="faculty@university.edu")
            submitted = st.form_submit_button("Create Faculty", type="primary")

        if submitted:
            form = validate_form(FacultyCreate, email=email)
            if form:
                run_action(
                    lambda: service.create_faculty(form),
                    "Faculty created successfully. Password set to email address.",
                    "Failed to create faculty",
                )

# ===========================
# LIST
# ===========================
faculties = load(service.list_faculties, "Failed to load faculties")

st.subheader(f"Faculty Members ({len(faculties)})")
render_table(
    faculties,
    {
        "full_name": "Name",
        "email": "Email",
        "phone_number": "Phone",
        "specialization": "Specialization",
        "department_code": "Department",
        "is_active": "Active",
    },
    empty="No faculty members found.",
    placeholders={"full_name": "Not set"},
)

manageable = [f for f in faculties if can_create_edit or can_update_faculty_profile(profile, f)]
if not manageable:
    st.stop()

# ===========================
# EDIT / PROFILE / DELETE
# ===========================
st.divider()
st.subheader("Manage Faculty")

by_label = {f"{f.display_name} <{f.email}>": f for f in manageable}
selected = by_label[st.selectbox("Faculty member", options=list(by_label))]

tabs = []
if can_create_edit:
    tabs.append("Details")
if can_update_faculty_profile(profile, selected):
    tabs.append("Profile")

for tab, label in zip(st.tabs(tabs), tabs):
    with tab:
        if label == "Details":
            with st.form(f"edit_faculty_{selected.user_id}"):
                full_name = st.text_input("Full Name", value=selected.full_name or "")
                email = st.text_input("Email", value=selected.email)
                phone = st.text_input("Phone Number", value=selected.phone_number or "")
                specialization = st.text_input("Specialization", value=selected.specialization or "")
                is_active = st.checkbox("Active", value=selected.is_active)
                submitted = st.form_submit_button("Save Changes")

            if submitted:
                form = validate_form(
                    FacultyUpdate,
                    full_name=full_name,
                    email=email,
                    phone_number=phone,
                    specialization=specialization,
                    is_active=is_active,
                )
                if form:
                    run_action(
                        lambda: service.update_faculty(selected.user_id, form),
                        "Faculty updated successfully",
                        "Failed to update faculty",
                    )

            if can_delete:
                st.markdown("**Danger zone**")
                if confirm_delete(f"faculty_{selected.user_id}", selected.display_name):
                    try:
                        result = service.delete_faculty(selected.user_id)
                    except ApiError as exc:
                        st.error(extract_error_message(exc, "Failed to delete faculty"))
                    else:
                        queue_toast(f'Faculty "{result.deleted_faculty.display_name}" deleted successfully')
                        st.rerun()

        if label == "Profile":
            with st.form(f"faculty_profile_{selected.user_id}"):
                phone = st.text_input("Phone Number", value=selected.phone_number or "",
                                      key=f"profile_phone_{selected.user_id}")
                specialization = st.text_input("Specialization", value=selected.specialization or "",
                                               key=f"profile_specialization_{selected.user_id}")
                submitted = st.form_submit_button("Update Profile")

            if submitted:
                form = validate_form(FacultyProfileUpdate, phone_number=phone, specialization=specialization)
                if form:
                    run_action(
                        lambda: service.update_faculty_profile(selected.user_id, form),
                        "Profile updated successfully",
                        "Failed to update profile",
                    )
