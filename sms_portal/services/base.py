import logging

from pydantic import ValidationError

from sms_portal.api import ApiClient, ApiError

logger = logging.getLogger(__name__)

UNEXPECTED_RESPONSE = "Unexpected response from server"


def parse_model(model, item):
    # a body the models cannot read is a backend fault, reported like any other
    try:
        return model.model_validate(item)
    except ValidationError as exc:
        logger.warning(f"[API] could not parse {model.__name__}: {exc.error_count()} error(s)")
        raise ApiError(UNEXPECTED_RESPONSE, payload=item) from exc


class ResourceService:
    """Shared plumbing for the per-resource services: a token-carrying client plus model parsing."""

    def __init__(self, client: ApiClient):
        self.client = client

    @staticmethod
    def _many(model, data):
        return [parse_model(model, item) for item in (data or [])]

    @staticmethod
    def _one(model, data):
        return parse_model(model, data or {})

    @staticmethod
    def _body(form, exclude_none=True):
        """JSON body from a pydantic form (dates as ISO strings, enums as values)."""
        return form.model_dump(mode="json", exclude_none=exclude_none)
