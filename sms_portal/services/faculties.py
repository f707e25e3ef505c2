import logging

from sms_portal.schemas.faculty import (
    DeleteFacultyResponse,
    Faculty,
    FacultyCreate,
    FacultyProfileUpdate,
    FacultyUpdate,
)
from sms_portal.services.base import ResourceService

logger = logging.getLogger(__name__)


class FacultyService(ResourceService):
    def list_faculties(self):
        data = self.client.get("/faculties", default_error="Failed to fetch faculties")
        return self._many(Faculty, data)

    def get_faculty(self, user_id: int) -> Faculty:
        data = self.client.get(f"/faculties/{user_id}", default_error="Failed to fetch faculty details")
        return self._one(Faculty, data)

    def create_faculty(self, form: FacultyCreate) -> dict:
        """Backend creates the account with the email as initial password."""
        data = self.client.post("/faculties", json=self._body(form), default_error="Failed to create faculty")
        logger.info(f"[FACULTY] created {form.email}")
        return data or {}

    def update_faculty(self, user_id: int, form: FacultyUpdate):
        data = self.client.put(f"/faculties/{user_id}", json=self._body(form), default_error="Failed to update faculty")
        logger.info(f"[FACULTY] updated {user_id}")
        return data

    def update_faculty_profile(self, user_id: int, form: FacultyProfileUpdate):
        data = self.client.put(f"/faculties/{user_id}", json=self._body(form), default_error="Failed to update profile")
        logger.info(f"[FACULTY] profile updated {user_id}")
        return data

    def delete_faculty(self, user_id: int) -> DeleteFacultyResponse:
        data = self.client.delete(f"/faculties/{user_id}", default_error="Failed to delete faculty")
        logger.info(f"[FACULTY] deleted {user_id}")
        return self._one(DeleteFacultyResponse, data)
