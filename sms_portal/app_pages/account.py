import streamlit as st

from sms_portal.api import ApiError
from sms_portal.auth import get_api_client
from sms_portal.permissions import is_faculty, is_student
from sms_portal.role_guard import guard_page
from sms_portal.schemas.account import PasswordChangeForm, ProfileUpdateForm
from sms_portal.schemas.profile import AddressForm, AddressType, FacultyProfileForm, StudentProfileForm
from sms_portal.services.account import AccountService
from sms_portal.services.batches import BatchService
from sms_portal.services.profiles import ProfileService
from sms_portal.ui import confirm_delete, load, run_action, show_flashes, validate_form

profile = guard_page()
show_flashes()

client = get_api_client()
account = AccountService(client)
profiles = ProfileService(client)

st.title("👤 Account")
st.markdown(f"**{profile.display_name}** · `{profile.user_type}` · {profile.email}")
st.divider()

tab_names = ["Profile", "Password"]
if is_student(profile):
    tab_names += ["Student Profile", "Addresses"]
elif is_faculty(profile):
    tab_names.append("Faculty Profile")

tabs = dict(zip(tab_names, st.tabs(tab_names)))

# ===========================
# BASIC PROFILE
# ===========================
with tabs["Profile"]:
    with st.form("account_profile"):
        full_name = st.text_input("Full Name", value=profile.full_name or "")
        email = st.text_input("Email", value=profile.email)
        submitted = st.form_submit_button("Update Profile", type="primary")

    if submitted:
        form = validate_form(ProfileUpdateForm, full_name=full_name, email=email)
        if form:
            run_action(lambda: account.update_profile(form), "Profile updated successfully", "Failed to update profile")

# ===========================
# PASSWORD
# ===========================
with tabs["Password"]:
    with st.form("account_password", clear_on_submit=True):
        current_password = st.text_input("Current Password", type="password")
        new_password = st.text_input("New Password", type="password")
        confirm_password = st.text_input("Confirm New Password", type="password")
        submitted = st.form_submit_button("Change Password", type="primary")

    if submitted:
        form = validate_form(
            PasswordChangeForm,
            current_password=current_password,
            new_password=new_password,
            confirm_password=confirm_password,
        )
        if form:
            run_action(lambda: account.change_password(form), "Password updated successfully",
                       "Failed to update password")

# ===========================
# STUDENT PROFILE
# ===========================
if "Student Profile" in tabs:
    with tabs["Student Profile"]:
        try:
            student = profiles.get_student_profile()
        except ApiError:
            # nothing saved yet; the form below creates it
            student = None
            st.info("No student profile yet. Fill in the form below to create one.")

        if student is not None:
            c1, c2, c3 = st.columns(3)
            c1.metric("Department", student.department_code or "N/A")
            c2.metric("Programme", student.programme_name or "N/A")
            c3.metric("Admission", "Approved" if student.is_approved_admission else "Pending")

        batches = load(BatchService(client).list_batches, "Failed to load batches")
        batch_by_label = {f"{b.batch_name} ({b.programme_name or '-'})": b.batch_id for b in batches}
        batch_labels = list(batch_by_label)
        current_batch = next(
            (label for label, batch_id in batch_by_label.items() if student and batch_id == student.batch_id),
            None,
        )

        with st.form("student_profile"):
            roll_number = st.text_input("Roll Number", value=(student.roll_number if student else "") or "")
            date_of_birth = st.date_input(
                "Date of Birth", value=student.date_of_birth if student else None, format="YYYY-MM-DD"
            )
            self_phone = st.text_input("Phone Number", value=(student.self_phone_number if student else "") or "")
            guardian_phone = st.text_input(
                "Guardian Phone Number", value=(student.guardian_phone_number if student else "") or ""
            )
            batch_label = st.selectbox(
                "Batch",
                options=batch_labels,
                index=batch_labels.index(current_batch) if current_batch else None,
            )
            is_part_time = st.checkbox("Part-time", value=bool(student and student.is_part_time))
            submitted = st.form_submit_button("Save Student Profile", type="primary")

        if submitted:
            form = validate_form(
                StudentProfileForm,
                roll_number=roll_number,
                date_of_birth=date_of_birth,
                self_phone_number=self_phone,
                guardian_phone_number=guardian_phone,
                batch_id=batch_by_label.get(batch_label),
                is_part_time=is_part_time,
            )
            if form:
                run_action(
                    lambda: profiles.upsert_student_profile(profile.user_id, form),
                    "Student profile updated successfully",
                    "Failed to update student profile",
                )

# ===========================
# ADDRESSES
# ===========================
def address_inputs(prefix, address=None):
    values = {}
    values["address_line_1"] = st.text_input("Address Line 1", value=address.address_line_1 if address else "",
                                             key=f"{prefix}_line_1")
    values["address_line_2"] = st.text_input("Address Line 2", value=(address.address_line_2 if address else "") or "",
                                             key=f"{prefix}_line_2")
    c1, c2 = st.columns(2)
    values["city"] = c1.text_input("City", value=address.city if address else "", key=f"{prefix}_city")
    values["state"] = c2.text_input("State", value=address.state if address else "", key=f"{prefix}_state")
    values["postal_code"] = c1.text_input("Postal Code", value=address.postal_code if address else "",
                                          key=f"{prefix}_postal_code")
    values["country"] = c2.text_input("Country", value=address.country if address else "India",
                                      key=f"{prefix}_country")
    return values


if "Addresses" in tabs:
    with tabs["Addresses"]:
        try:
            student = profiles.get_student_profile()
        except ApiError:
            student = None

        addresses = load(profiles.list_addresses, "Failed to load addresses")

        if not addresses:
            st.info("No addresses saved yet.")

        for address in addresses:
            tags = []
            if student and address.address_id == student.current_address_id:
                tags.append("Current")
            if student and address.address_id == student.permanent_address_id:
                tags.append("Permanent")

            title = address.one_line() + (f"  ·  {' / '.join(tags)}" if tags else "")
            with st.expander(title):
                a1, a2 = st.columns(2)
                for col, address_type in zip((a1, a2), AddressType):
                    with col:
                        if st.button(f"Set as {address_type.value}", key=f"assign_{address_type.value}_{address.address_id}"):
                            run_action(
                                lambda: profiles.assign_address(address.address_id, address_type),
                                f"Address assigned as {address_type.value} address successfully",
                                f"Failed to assign {address_type.value} address",
                            )

                with st.form(f"edit_address_{address.address_id}"):
                    values = address_inputs(f"address_{address.address_id}", address)
                    submitted = st.form_submit_button("Save Address")

                if submitted:
                    form = validate_form(AddressForm, **values)
                    if form:
                        run_action(
                            lambda: profiles.update_address(address.address_id, form),
                            "Address updated successfully",
                            "Failed to update address",
                        )

                if confirm_delete(f"address_{address.address_id}", "this address"):
                    run_action(
                        lambda: profiles.delete_address(address.address_id),
                        "Address deleted successfully",
                        "Failed to delete address",
                    )

        st.divider()
        st.subheader("➕ Add Address")
        with st.form("new_address", clear_on_submit=True):
            values = address_inputs("new_address")
            submitted = st.form_submit_button("Add Address", type="primary")

        if submitted:
            form = validate_form(AddressForm, **values)
            if form:
                run_action(
                    lambda: profiles.create_address(profile.user_id, form),
                    "Address added successfully",
                    "Failed to add address",
                )

# ===========================
# FACULTY PROFILE
# ===========================
if "Faculty Profile" in tabs:
    with tabs["Faculty Profile"]:
        try:
            faculty = profiles.get_faculty_profile()
        except ApiError:
            faculty = None
            st.info("No faculty profile yet. Fill in the form below to create one.")

        with st.form("faculty_profile"):
            phone = st.text_input("Phone Number", value=(faculty.phone_number if faculty else "") or "")
            specialization = st.text_input("Specialization", value=(faculty.specialization if faculty else "") or "")
            submitted = st.form_submit_button("Save Faculty Profile", type="primary")

        if submitted:
            form = validate_form(FacultyProfileForm, phone_number=phone, specialization=specialization)
            if form:
                run_action(
                    lambda: profiles.upsert_faculty_profile(profile.user_id, form),
                    "Faculty profile updated successfully",
                    "Failed to update faculty profile",
                )
