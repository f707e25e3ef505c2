"""
Shared fixtures: canned backend responses and a session-state stand-in.
"""
import json as jsonlib

import pytest
import requests

from sms_portal.api import ApiClient
from sms_portal.auth import TokenStore

BASE_URL = "http://backend.test/sms/api"


def build_response(status_code=200, json=None, text=None, reason=None):
    """A real requests.Response carrying the given body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    if json is not None:
        response._content = jsonlib.dumps(json).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def session_state():
    """Plain dict in place of st.session_state."""
    return {}


@pytest.fixture
def store(session_state):
    return TokenStore(state=session_state, key="auth_token")


@pytest.fixture
def client():
    return ApiClient(base_url=BASE_URL, token="test-token", timeout=5)


@pytest.fixture
def anonymous_client():
    return ApiClient(base_url=BASE_URL, timeout=5)
