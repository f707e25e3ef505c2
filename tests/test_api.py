"""
Unit Tests for the backend HTTP client
Tests for: request building, error message extraction, transport failures
"""
from unittest.mock import patch

import pytest
import requests

from sms_portal.api import ApiClient, ApiError, extract_error_message, message_from_response


class TestRequestBuilding:
    """Test what goes over the wire"""

    def test_get_sends_bearer_token(self, client, make_response):
        """Test GET carries the token and no content type"""
        with patch("requests.request", return_value=make_response(200, json=[])) as mock_request:
            client.get("/departments")

        mock_request.assert_called_once_with(
            method="GET",
            url=f"{client.base_url}/departments",
            headers={"Authorization": "Bearer test-token"},
            json=None,
            params=None,
            timeout=5,
        )

    def test_post_sets_json_content_type(self, client, make_response):
        """Test a request with a body is sent as JSON"""
        with patch("requests.request", return_value=make_response(201, json={"ok": True})) as mock_request:
            client.post("/degrees", json={"level_name": "B.Tech"})

        kwargs = mock_request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {"level_name": "B.Tech"}
        assert kwargs["headers"]["Content-Type"] == "application/json"

    def test_no_token_no_authorization_header(self, anonymous_client, make_response):
        """Test anonymous calls omit the Authorization header"""
        with patch("requests.request", return_value=make_response(200, json={})) as mock_request:
            anonymous_client.get("/health")

        assert "Authorization" not in mock_request.call_args.kwargs["headers"]

    def test_query_params_forwarded(self, client, make_response):
        """Test GET params reach requests"""
        with patch("requests.request", return_value=make_response(200, json=[])) as mock_request:
            client.get("/users", params={"type": "HOD"})

        assert mock_request.call_args.kwargs["params"] == {"type": "HOD"}

    def test_base_url_trailing_slash_stripped(self):
        """Test base URL normalisation"""
        assert ApiClient(base_url="http://x/api/").base_url == "http://x/api"


class TestResponses:
    """Test response handling"""

    def test_json_body_returned(self, client, make_response):
        with patch("requests.request", return_value=make_response(200, json=[{"degree_level_id": 1}])):
            assert client.get("/degrees") == [{"degree_level_id": 1}]

    def test_empty_body_returns_none(self, client, make_response):
        """Test 204-style responses give None"""
        with patch("requests.request", return_value=make_response(204)):
            assert client.delete("/degrees/1") is None

    def test_invalid_json_raises(self, client, make_response):
        with patch("requests.request", return_value=make_response(200, text="<html>oops</html>")):
            with pytest.raises(ApiError) as exc_info:
                client.get("/degrees")

        assert str(exc_info.value) == "Server returned invalid JSON"

    def test_error_field_used_as_message(self, client, make_response):
        """Test {"error": ...} bodies become the ApiError message"""
        response = make_response(409, json={"error": "Department code already exists"})
        with patch("requests.request", return_value=response):
            with pytest.raises(ApiError) as exc_info:
                client.post("/departments", json={}, default_error="Failed to create department")

        error = exc_info.value
        assert error.message == "Department code already exists"
        assert error.status_code == 409
        assert error.payload == {"error": "Department code already exists"}

    def test_default_error_when_body_has_no_message(self, client, make_response):
        response = make_response(400, json={"code": 17})
        with patch("requests.request", return_value=response):
            with pytest.raises(ApiError) as exc_info:
                client.get("/programmes", default_error="Failed to fetch programmes")

        assert exc_info.value.message == "Failed to fetch programmes"

    def test_plain_text_error(self, client, make_response):
        with patch("requests.request", return_value=make_response(500, text="  database is down \n")):
            with pytest.raises(ApiError) as exc_info:
                client.get("/batches")

        assert exc_info.value.message == "database is down"
        assert exc_info.value.payload == "  database is down \n"

    def test_reason_used_when_body_empty(self, client, make_response):
        with patch("requests.request", return_value=make_response(404, reason="Not Found")):
            with pytest.raises(ApiError) as exc_info:
                client.get("/batches/99")

        assert exc_info.value.message == "Not Found"


class TestTransportFailures:
    """Test network-level failures map to friendly messages"""

    def test_timeout(self, client):
        with patch("requests.request", side_effect=requests.exceptions.Timeout()):
            with pytest.raises(ApiError) as exc_info:
                client.get("/departments")

        assert exc_info.value.message == "Server took too long to respond. Please try again."
        assert exc_info.value.status_code is None

    def test_connection_error(self, client):
        with patch("requests.request", side_effect=requests.exceptions.ConnectionError()):
            with pytest.raises(ApiError) as exc_info:
                client.get("/departments")

        assert exc_info.value.message == "Cannot reach server. Is the backend running?"

    def test_require_token(self, anonymous_client):
        with pytest.raises(ApiError) as exc_info:
            anonymous_client.require_token()

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "No authentication token found"


class TestMessageFromResponse:
    def test_message_key(self, make_response):
        assert message_from_response(make_response(400, json={"message": "Bad input"})) == "Bad input"

    def test_detail_key(self, make_response):
        assert message_from_response(make_response(422, json={"detail": "Unprocessable"})) == "Unprocessable"

    def test_error_preferred_over_message(self, make_response):
        body = {"message": "generic", "error": "specific"}
        assert message_from_response(make_response(400, json=body)) == "specific"

    def test_blank_error_skipped(self, make_response):
        body = {"error": "   ", "message": "Use this one"}
        assert message_from_response(make_response(400, json=body)) == "Use this one"

    def test_falls_back_to_default(self, make_response):
        assert message_from_response(make_response(500), default="Nope") == "Nope"


class TestExtractErrorMessage:
    """Test error -> human message conversion"""

    def test_api_error(self):
        assert extract_error_message(ApiError("HOD not found")) == "HOD not found"

    def test_api_error_without_message(self):
        assert extract_error_message(ApiError(""), "Failed") == "Failed"

    def test_dict(self):
        assert extract_error_message({"message": "Batch exists"}) == "Batch exists"

    def test_json_string(self):
        assert extract_error_message('{"error": "Invalid credentials"}') == "Invalid credentials"

    def test_json_non_object(self):
        assert extract_error_message("[1, 2]", "Failed") == "Failed"

    def test_plain_string(self):
        assert extract_error_message("  Something broke ") == "Something broke"

    def test_blank_string(self):
        assert extract_error_message("   ", "Failed") == "Failed"

    def test_exception(self):
        assert extract_error_message(RuntimeError("oops")) == "oops"

    def test_unknown_type(self):
        assert extract_error_message(None) == "An error occurred"
