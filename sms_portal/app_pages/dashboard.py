import streamlit as st

from sms_portal.auth import get_api_client
from sms_portal.role_guard import guard_page
from sms_portal.schemas.user import Role
from sms_portal.services.overview import admin_overview, hod_overview
from sms_portal.ui import show_flashes

profile = guard_page()
show_flashes()

WELCOME = {
    Role.ADMIN: ("System Overview", "Here's what's happening in your system.",
                 "Use the sidebar to manage Departments, Degrees and Users."),
    Role.HOD: ("Department Overview", "Here's your department summary.",
               "Use the sidebar to manage Programmes, Batches and Faculty."),
    Role.STAFF: ("Staff Dashboard", "Manage students and batches from here.",
                 "Use the sidebar to open Programmes and Batches."),
    Role.FACULTY: ("Faculty Dashboard", "Access your academic tools here.",
                   "Use the sidebar to view Programmes and Batches, or update your profile under Account."),
    Role.STUDENT: ("Student Dashboard", "View your academic information here.",
                   "Use the sidebar to open your Account and academic information."),
}

# ---------------------------
# STYLES
# ---------------------------
st.markdown("""
<style>

.kpi-wrapper {
    overflow: hidden;
    border: 1px solid rgba(255,255,255,0.1);
    background: #0e1117;
}

.kpi-title-box {
    padding: 10px 14px;
    background: #111827;
    font-size: 17px;
    font-weight: 600;
    color: #9ca3af;
    text-align: center;
}

.kpi-value-box {
    padding: 14px;
    font-size: 32px;
    font-weight: 700;
    text-align: center;
}

</style>
""", unsafe_allow_html=True)


def render_kpis(kpis):
    cols = st.columns(len(kpis))
    for col, kpi in zip(cols, kpis):
        with col:
            st.markdown(
                f"""
                <div class="kpi-wrapper">
                    <div class="kpi-title-box">{kpi["title"]}</div>
                    <div class="kpi-value-box" style="color:{kpi["color"]}">{kpi["value"]}</div>
                </div>
                """,
                unsafe_allow_html=True
            )


role = profile.role

if role not in WELCOME:
    st.title("Unknown User Type")
    st.warning("Your user type is not recognized. Please contact support.")
    st.stop()

title, subtitle, hint = WELCOME[role]
st.title(title)
st.markdown(f"Welcome back, **{profile.display_name}**. {subtitle}")
st.divider()

if role is Role.ADMIN:
    with st.spinner("Loading overview..."):
        render_kpis(admin_overview(get_api_client()))
    st.divider()
elif role is Role.HOD:
    with st.spinner("Loading department summary..."):
        render_kpis(hod_overview(get_api_client()))
    st.divider()
elif role is Role.STUDENT:
    st.markdown(f"`Student` · {profile.email}")

st.info(hint)
