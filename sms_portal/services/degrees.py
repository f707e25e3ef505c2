import logging

from sms_portal.schemas.degree import DegreeForm, DegreeLevel
from sms_portal.services.base import ResourceService

logger = logging.getLogger(__name__)


class DegreeService(ResourceService):
    def list_degrees(self):
        data = self.client.get("/degrees", default_error="Failed to fetch degrees")
        return self._many(DegreeLevel, data)

    def get_degree(self, degree_level_id: int) -> DegreeLevel:
        data = self.client.get(f"/degrees/{degree_level_id}", default_error="Failed to fetch degree")
        return self._one(DegreeLevel, data)

    def create_degree(self, form: DegreeForm):
        data = self.client.post("/degrees", json=self._body(form), default_error="Failed to create degree")
        logger.info(f"[DEGREES] created {form.level_name}")
        return data

    def update_degree(self, degree_level_id: int, form: DegreeForm):
        data = self.client.put(
            f"/degrees/{degree_level_id}",
            json=self._body(form),
            default_error="Failed to update degree",
        )
        logger.info(f"[DEGREES] updated {degree_level_id}")
        return data

    def delete_degree(self, degree_level_id: int):
        data = self.client.delete(f"/degrees/{degree_level_id}", default_error="Failed to delete degree")
        logger.info(f"[DEGREES] deleted {degree_level_id}")
        return data
