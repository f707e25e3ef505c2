import json
import logging

import requests

from sms_portal import config

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for any non-2xx backend response or transport failure."""

    def __init__(self, message, status_code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __str__(self):
        return self.message


def _pick_message(data, default):
    if isinstance(data, dict):
        for key in ("error", "message", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return default


def message_from_response(response: requests.Response, default: str = "API request failed") -> str:
    """
    Best-effort extraction of a readable error message from a failed response.

    The backend is not consistent: some endpoints answer {"error": ...},
    some {"message": ...}, some plain text and some nothing at all.
    """
    text = response.text or ""

    try:
        data = response.json()
    except ValueError:
        data = None

    if data is not None:
        return _pick_message(data, default)

    if text.strip():
        return text.strip()

    return response.reason or default


def extract_error_message(error, fallback: str = "An error occurred") -> str:
    if isinstance(error, ApiError):
        return error.message or fallback

    if isinstance(error, dict):
        return _pick_message(error, fallback)

    if isinstance(error, BaseException):
        error = str(error)

    if isinstance(error, str):
        try:
            parsed = json.loads(error)
        except ValueError:
            return error.strip() or fallback
        if isinstance(parsed, dict):
            return _pick_message(parsed, fallback)
        return fallback

    return fallback


class ApiClient:
    def __init__(self, base_url=None, token=None, timeout=None):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.token = token
        self.timeout = timeout or config.REQUEST_TIMEOUT

    def _headers(self, has_body):
        headers = {}
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def require_token(self):
        if not self.token:
            raise ApiError("No authentication token found", status_code=401)

    def request(self, method, endpoint, json=None, params=None, default_error="API request failed"):
        method = method.upper()
        url = f"{self.base_url}{endpoint}"

        try:
            response = requests.request(
                method=method,
                url=url,
                headers=self._headers(json is not None),
                json=json,
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as exc:
            logger.warning(f"[API] {method} {endpoint} timed out")
            raise ApiError("Server took too long to respond. Please try again.") from exc
        except requests.exceptions.ConnectionError as exc:
            logger.warning(f"[API] {method} {endpoint} connection failed")
            raise ApiError("Cannot reach server. Is the backend running?") from exc

        logger.debug(f"[API] {method} {endpoint} -> {response.status_code}")

        if response.status_code >= 400:
            message = message_from_response(response, default_error)
            logger.info(f"[API] {method} {endpoint} failed ({response.status_code}): {message}")
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            raise ApiError(message, status_code=response.status_code, payload=payload)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError("Server returned invalid JSON", status_code=response.status_code) from exc

    def get(self, endpoint, params=None, default_error="API request failed"):
        return self.request("GET", endpoint, params=params, default_error=default_error)

    def post(self, endpoint, json=None, default_error="API request failed"):
        return self.request("POST", endpoint, json=json, default_error=default_error)

    def put(self, endpoint, json=None, default_error="API request failed"):
        return self.request("PUT", endpoint, json=json, default_error=default_error)

    def delete(self, endpoint, default_error="API request failed"):
        return self.request("DELETE", endpoint, default_error=default_error)
