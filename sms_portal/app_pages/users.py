import math

import streamlit as st

from sms_portal.auth import get_api_client
from sms_portal.role_guard import guard_page
from sms_portal.schemas.user import STAFF_ROLES, Role
from sms_portal.services.users import UserService, filter_staff_users
from sms_portal.ui import confirm_delete, load, run_action, show_flashes, to_frame

PAGE_SIZE = 10

profile = guard_page([Role.ADMIN])
show_flashes()

service = UserService(get_api_client())

# ---------------------------
# STATE
# ---------------------------
if "users_page" not in st.session_state:
    st.session_state.users_page = 1

st.title("👥 System Users")
st.markdown("Administrators, HODs, staff and faculty accounts.")
st.divider()

# ===========================
# FILTERS
# ===========================
c1, c2 = st.columns([1, 3])
with c1:
    filter_type = st.selectbox("User type", ["ALL"] + [r.value for r in STAFF_ROLES])
with c2:
    search_query = st.text_input("Search", placeholder="Name, email or department")

users = load(service.list_users, "Failed to load users")
filtered = filter_staff_users(users, filter_type, search_query)

st.subheader(f"Users: {len(filtered)}")

if not filtered:
    st.info("No users found.")
    st.stop()

# ===========================
# PAGINATED RESULTS
# ===========================
total_pages = max(1, math.ceil(len(filtered) / PAGE_SIZE))
st.session_state.users_page = min(st.session_state.users_page, total_pages)

col1, col2, col3 = st.columns([1, 3, 1])

with col1:
    if st.button("⬅ Prev", disabled=st.session_state.users_page == 1, use_container_width=True):
        st.session_state.users_page -= 1
        st.rerun()

with col3:
    if st.button("Next ➡", disabled=st.session_state.users_page == total_pages, use_container_width=True):
        st.session_state.users_page += 1
        st.rerun()

with col2:
    st.markdown(
        f"<div style='text-align:center'>Page {st.session_state.users_page} / {total_pages}</div>",
        unsafe_allow_html=True
    )

start = (st.session_state.users_page - 1) * PAGE_SIZE
page_items = filtered[start:start + PAGE_SIZE]

st.dataframe(
    to_frame(
        page_items,
        {
            "full_name": "Name",
            "email": "Email",
            "user_type": "Type",
            "department_code": "Department",
            "is_active": "Active",
        },
        placeholders={"full_name": "Not set"},
    ),
    use_container_width=True,
    hide_index=True,
)

# ===========================
# DELETE USER
# ===========================
st.divider()
st.subheader("Delete User")

by_label = {f"{u.display_name} <{u.email}> ({u.user_type})": u for u in filtered if u.email != profile.email}
if not by_label:
    st.caption("No other users to manage.")
    st.stop()

selected = by_label[st.selectbox("User", options=list(by_label))]

if confirm_delete(f"user_{selected.user_id}", selected.display_name):
    run_action(
        lambda: service.delete_user(selected.user_id),
        f'User "{selected.display_name}" deleted successfully',
        "Failed to delete user",
    )
