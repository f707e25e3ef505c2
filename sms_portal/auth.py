import logging

import streamlit as st
from pydantic import ValidationError

from sms_portal import config
from sms_portal.api import ApiClient, ApiError, extract_error_message
from sms_portal.schemas.auth import LoginRequest, LoginResponse, UserProfile
from sms_portal.schemas.common import format_validation_errors
from sms_portal.services.base import parse_model

logger = logging.getLogger(__name__)

PROFILE_KEY = "user_profile"


class TokenStore:
    """
    Bearer token storage, kept in Streamlit session state.
    Takes any mutable mapping so it can be driven without a running app.
    """

    def __init__(self, state=None, key=None):
        self.state = st.session_state if state is None else state
        self.key = key or config.TOKEN_KEY

    def get(self):
        return self.state.get(self.key)

    def set(self, token: str) -> None:
        self.state[self.key] = token
        # a new token means a new identity
        self.state.pop(PROFILE_KEY, None)

    def clear(self) -> None:
        self.state.pop(self.key, None)
        self.state.pop(PROFILE_KEY, None)

    def get_cached_profile(self):
        return self.state.get(PROFILE_KEY)

    def cache_profile(self, profile: UserProfile) -> None:
        self.state[PROFILE_KEY] = profile


class AuthService:
    def __init__(self, store: TokenStore = None, base_url: str = None):
        self.store = store or TokenStore()
        self.base_url = base_url

    def client(self, token=None) -> ApiClient:
        return ApiClient(base_url=self.base_url, token=token or self.store.get())

    def login(self, email: str, password: str) -> LoginResponse:
        data = self.client().post(
            "/auth/login",
            json={"email": email, "password": password},
            default_error="Login failed",
        )
        result = parse_model(LoginResponse, data or {})
        self.store.set(result.token)
        logger.info(f"[AUTH] login ok for {email}")
        return result

    def get_profile(self, token=None) -> UserProfile:
        client = self.client(token)
        client.require_token()
        data = client.get("/auth/me", default_error="Failed to get profile")
        return parse_model(UserProfile, data or {})

    def logout(self) -> None:
        self.store.clear()
        logger.info("[AUTH] logged out")


def get_api_client() -> ApiClient:
    """Client carrying the session's bearer token; pages build their services from it."""
    return ApiClient(token=TokenStore().get())


def login_ui():
    st.title("Login")
    st.caption(f"{config.UNIVERSITY_NAME} · Student Management System")

    with st.form("login_form"):
        email = st.text_input("Email", key="login_email")
        password = st.text_input("Password", type="password", key="login_password")
        submitted = st.form_submit_button("Login")

    if not submitted:
        return

    try:
        credentials = LoginRequest(email=email, password=password)
    except ValidationError as exc:
        for message in format_validation_errors(exc):
            st.error(message)
        return

    auth = AuthService()
    try:
        auth.login(credentials.email, credentials.password)
        profile = auth.get_profile()
    except ApiError as exc:
        logger.info(f"[AUTH] login failed for {credentials.email}: {exc}")
        auth.logout()
        st.error(f"❌ {extract_error_message(exc, 'Login failed')}")
        return

    auth.store.cache_profile(profile)
    st.success("✅ Logged in successfully")
    st.rerun()


def require_auth():
    """
    Call this at the top of the entry script.
    Shows the login form and halts the run when no token is held.
    """
    if not TokenStore().get():
        login_ui()
        st.stop()


def show_profile_section():
    profile = TokenStore().get_cached_profile()
    if profile is None:
        return

    with st.sidebar:
        st.markdown(f"**{profile.display_name}**")
        st.caption(f"{profile.user_type} · {profile.email}")
        if st.button("Logout", key="logout_btn", use_container_width=True):
            AuthService().logout()
            st.rerun()
