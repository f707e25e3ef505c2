import logging

from sms_portal.schemas.programme import Programme, ProgrammeCreate, ProgrammeUpdate
from sms_portal.services.base import ResourceService

logger = logging.getLogger(__name__)


class ProgrammeService(ResourceService):
    """Programmes of the caller's department. Any authenticated user may read; HODs manage."""

    def list_programmes(self):
        self.client.require_token()
        data = self.client.get("/programmes", default_error="Failed to fetch programmes")
        return self._many(Programme, data)

    def get_programme(self, programme_id: int) -> Programme:
        self.client.require_token()
        data = self.client.get(f"/programmes/{programme_id}", default_error="Failed to fetch programme")
        return self._one(Programme, data)

    def create_programme(self, form: ProgrammeCreate):
        self.client.require_token()
        data = self.client.post("/programmes", json=self._body(form), default_error="Failed to create programme")
        logger.info(f"[PROGRAMMES] created {form.programme_name}")
        return data

    def update_programme(self, programme_id: int, form: ProgrammeUpdate):
        self.client.require_token()
        data = self.client.put(
            f"/programmes/{programme_id}",
            json=self._body(form),
            default_error="Failed to update programme",
        )
        logger.info(f"[PROGRAMMES] updated {programme_id}")
        return data

    def delete_programme(self, programme_id: int):
        self.client.require_token()
        data = self.client.delete(f"/programmes/{programme_id}", default_error="Failed to delete programme")
        logger.info(f"[PROGRAMMES] deleted {programme_id}")
        return data
