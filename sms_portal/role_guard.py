import logging
from enum import Enum
from typing import NamedTuple, Optional

import streamlit as st

from sms_portal.api import ApiError
from sms_portal.auth import AuthService, TokenStore
from sms_portal.schemas.auth import UserProfile
from sms_portal.schemas.user import Role

logger = logging.getLogger(__name__)

DASHBOARD_PAGE = "app_pages/dashboard.py"


class AccessDecision(str, Enum):
    ALLOW = "ALLOW"
    LOGIN = "LOGIN"
    UNAUTHORIZED = "UNAUTHORIZED"


class AccessResult(NamedTuple):
    decision: AccessDecision
    profile: Optional[UserProfile] = None


def _normalise_roles(allowed_roles):
    if not allowed_roles:
        return None
    return {Role.parse(r) for r in allowed_roles} - {None}


def check_access(store: TokenStore, auth: AuthService, allowed_roles=None) -> AccessResult:
    """
    Decide whether the current session may see a page.

    No token -> LOGIN. A token the backend rejects is dropped -> LOGIN.
    A role outside allowed_roles -> UNAUTHORIZED. Otherwise ALLOW, with the
    fresh profile cached for the sidebar and permission checks.
    """
    token = store.get()
    if not token:
        return AccessResult(AccessDecision.LOGIN)

    try:
        profile = auth.get_profile(token)
    except ApiError as exc:
        logger.info(f"[GUARD] profile fetch failed, dropping token: {exc}")
        store.clear()
        return AccessResult(AccessDecision.LOGIN)

    store.cache_profile(profile)

    roles = _normalise_roles(allowed_roles)
    if roles is not None and profile.role not in roles:
        logger.info(f"[GUARD] role {profile.user_type} not in {sorted(r.value for r in roles)}")
        return AccessResult(AccessDecision.UNAUTHORIZED, profile)

    return AccessResult(AccessDecision.ALLOW, profile)


def current_profile(store: TokenStore = None, refresh: bool = False) -> Optional[UserProfile]:
    store = store or TokenStore()
    profile = store.get_cached_profile()
    if profile is not None and not refresh:
        return profile
    if not store.get():
        return None

    try:
        profile = AuthService(store).get_profile()
    except ApiError as exc:
        logger.info(f"[GUARD] could not refresh profile: {exc}")
        store.clear()
        return None

    store.cache_profile(profile)
    return profile


def get_user_role(store: TokenStore = None) -> str:
    """
    Public function to get user role - used by navigation system
    """
    profile = current_profile(store)
    if profile is None or profile.role is None:
        return ""
    return profile.role.value


def render_unauthorized():
    st.title("⛔ Unauthorized")
    st.error("Access restricted. Your role does not have access to this page.")
    st.caption("If you believe this is a mistake, please contact an administrator.")
    st.page_link(DASHBOARD_PAGE, label="Back to Dashboard", icon="🏠")


def guard_page(allowed_roles=None) -> UserProfile:
    """
    Call this at the top of every page script.
    Returns the caller's profile; otherwise renders login / unauthorized and halts the run.
    """
    store = TokenStore()
    result = check_access(store, AuthService(store), allowed_roles)

    if result.decision is AccessDecision.LOGIN:
        # require_auth() in the entry script shows the login form on the rerun
        st.rerun()

    if result.decision is AccessDecision.UNAUTHORIZED:
        render_unauthorized()
        st.stop()

    return result.profile
