"""
Unit Tests for page access control
Tests for: access decisions, profile caching, role lookup
"""
from unittest.mock import MagicMock, patch

from sms_portal.api import ApiError
from sms_portal.role_guard import AccessDecision, check_access, current_profile, get_user_role
from sms_portal.schemas.auth import UserProfile
from sms_portal.schemas.user import Role


def make_profile(user_type="FACULTY"):
    return UserProfile(user_id=5, user_type=user_type, email="f@tezu.ac.in", full_name="Ravi Kumar")


def fake_auth(profile=None, error=None):
    auth = MagicMock()
    if error is not None:
        auth.get_profile.side_effect = error
    else:
        auth.get_profile.return_value = profile
    return auth


class TestCheckAccess:
    """Test the guard's decision table"""

    def test_no_token_sends_to_login(self, store):
        auth = fake_auth(make_profile())

        result = check_access(store, auth)

        assert result.decision is AccessDecision.LOGIN
        assert result.profile is None
        auth.get_profile.assert_not_called()

    def test_rejected_token_is_dropped(self, store):
        """Test an expired token is cleared and the user sent to login"""
        store.set("expired")
        auth = fake_auth(error=ApiError("Token expired", status_code=401))

        result = check_access(store, auth)

        assert result.decision is AccessDecision.LOGIN
        assert store.get() is None

    def test_any_role_allowed_without_restriction(self, store):
        store.set("jwt")
        profile = make_profile("STUDENT")

        result = check_access(store, fake_auth(profile))

        assert result.decision is AccessDecision.ALLOW
        assert result.profile == profile

    def test_role_outside_allowed_set(self, store):
        store.set("jwt")
        profile = make_profile("HOD")

        result = check_access(store, fake_auth(profile), [Role.ADMIN])

        assert result.decision is AccessDecision.UNAUTHORIZED
        assert result.profile == profile

    def test_role_inside_allowed_set(self, store):
        store.set("jwt")

        result = check_access(store, fake_auth(make_profile("FACULTY")), [Role.HOD, Role.FACULTY])

        assert result.decision is AccessDecision.ALLOW

    def test_allowed_roles_as_strings(self, store):
        """Test lower-case role names are accepted"""
        store.set("jwt")

        result = check_access(store, fake_auth(make_profile("ADMIN")), ["admin"])

        assert result.decision is AccessDecision.ALLOW

    def test_unknown_role_is_unauthorized(self, store):
        store.set("jwt")

        result = check_access(store, fake_auth(make_profile("VISITOR")), [Role.ADMIN])

        assert result.decision is AccessDecision.UNAUTHORIZED

    def test_profile_is_cached(self, store):
        store.set("jwt")
        profile = make_profile("ADMIN")

        check_access(store, fake_auth(profile))

        assert store.get_cached_profile() == profile

    def test_token_passed_to_profile_fetch(self, store):
        store.set("jwt-xyz")
        auth = fake_auth(make_profile())

        check_access(store, auth)

        auth.get_profile.assert_called_once_with("jwt-xyz")


class TestCurrentProfile:
    """Test cached profile lookup"""

    def test_cached_profile_served(self, store):
        store.set("jwt")
        store.cache_profile(make_profile("HOD"))

        with patch("requests.request") as mock_request:
            profile = current_profile(store)

        assert profile.user_type == "HOD"
        mock_request.assert_not_called()

    def test_no_token(self, store):
        assert current_profile(store) is None

    def test_fetches_when_not_cached(self, store, make_response):
        store.set("jwt")
        body = {"user_type": "STAFF", "email": "s@tezu.ac.in", "full_name": "Staff One"}

        with patch("requests.request", return_value=make_response(200, json=body)):
            profile = current_profile(store)

        assert profile.role is Role.STAFF
        assert store.get_cached_profile() == profile

    def test_refresh_bypasses_cache(self, store, make_response):
        store.set("jwt")
        store.cache_profile(make_profile("FACULTY"))
        body = {"user_type": "HOD", "email": "f@tezu.ac.in", "full_name": "Ravi Kumar"}

        with patch("requests.request", return_value=make_response(200, json=body)):
            profile = current_profile(store, refresh=True)

        assert profile.role is Role.HOD

    def test_rejected_token_cleared(self, store, make_response):
        store.set("jwt")

        with patch("requests.request", return_value=make_response(401, json={"error": "Invalid token"})):
            assert current_profile(store) is None

        assert store.get() is None


class TestGetUserRole:
    def test_role_from_cached_profile(self, store):
        store.set("jwt")
        store.cache_profile(make_profile("hod"))

        assert get_user_role(store) == "HOD"

    def test_unknown_role_is_empty(self, store):
        store.set("jwt")
        store.cache_profile(make_profile("VISITOR"))

        assert get_user_role(store) == ""

    def test_logged_out_is_empty(self, store):
        assert get_user_role(store) == ""
