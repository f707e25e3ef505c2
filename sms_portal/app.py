import streamlit as st

from sms_portal.auth import require_auth, show_profile_section
from sms_portal.config import configure_logging
from sms_portal.navigation import setup_navigation
from sms_portal.role_guard import current_profile

configure_logging()

st.set_page_config(page_title="Student Management System", layout="wide")

# Check authentication (shows the login form and stops when there is no token)
require_auth()

# Fetches /auth/me once, then served from the session cache
profile = current_profile()

# Token was rejected by the backend and has been dropped; rerun lands on the login form
if profile is None:
    st.rerun()

show_profile_section()

# Setup role-based navigation
pg = setup_navigation(profile.user_type.upper())
pg.run()
