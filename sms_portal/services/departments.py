import logging

from sms_portal.schemas.department import CreateDepartmentResponse, Department, DepartmentForm
from sms_portal.services.base import ResourceService

logger = logging.getLogger(__name__)

DEPARTMENT_FIELDS = ("department_code", "department_name", "hod_email")


def changed_fields(department: Department, form: DepartmentForm) -> dict:
    """Only the fields the edit form actually changed."""
    changes = {}
    for field in DEPARTMENT_FIELDS:
        new = getattr(form, field)
        if new != getattr(department, field):
            changes[field] = new
    return changes


class DepartmentService(ResourceService):
    def list_departments(self):
        data = self.client.get("/departments", default_error="Failed to fetch departments")
        return self._many(Department, data)

    def get_department(self, department_id: int) -> Department:
        data = self.client.get(f"/departments/{department_id}", default_error="Failed to fetch department")
        return self._one(Department, data)

    def create_department(self, form: DepartmentForm) -> CreateDepartmentResponse:
        data = self.client.post("/departments", json=self._body(form), default_error="Failed to create department")
        logger.info(f"[DEPARTMENTS] created {form.department_code}")
        return self._one(CreateDepartmentResponse, data)

    def update_department(self, department_id: int, changes: dict):
        data = self.client.put(
            f"/departments/{department_id}",
            json=changes,
            default_error="Failed to update department",
        )
        logger.info(f"[DEPARTMENTS] updated {department_id}: {sorted(changes)}")
        return data

    def delete_department(self, department_id: int):
        data = self.client.delete(f"/departments/{department_id}", default_error="Failed to delete department")
        logger.info(f"[DEPARTMENTS] deleted {department_id}")
        return data
