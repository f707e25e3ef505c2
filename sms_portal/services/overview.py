import logging

from sms_portal.api import ApiError
from sms_portal.schemas.user import Role
from sms_portal.services.departments import DepartmentService
from sms_portal.services.faculties import FacultyService
from sms_portal.services.programmes import ProgrammeService
from sms_portal.services.users import UserService

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def _count(fetch, label):
    try:
        return len(fetch())
    except ApiError as exc:
        logger.info(f"[OVERVIEW] {label} unavailable: {exc}")
        return NOT_AVAILABLE


def admin_overview(client) -> list:
    users = UserService(client)
    return [
        {"title": "Total Departments", "value": _count(DepartmentService(client).list_departments, "departments"),
         "color": "#2563EB"},
        {"title": "Total Users", "value": _count(users.list_users, "users"), "color": "#7C3AED"},
        {"title": "Active Students",
         "value": _count(lambda: [u for u in users.list_users(Role.STUDENT) if u.is_active], "students"),
         "color": "#00CED1"},
        {"title": "Faculty Members", "value": _count(lambda: users.list_users(Role.FACULTY), "faculty"),
         "color": "#D97706"},
    ]


def hod_overview(client) -> list:
    return [
        {"title": "Students", "value": _count(lambda: UserService(client).list_users(Role.STUDENT), "students"),
         "color": "#2563EB"},
        {"title": "Faculty", "value": _count(FacultyService(client).list_faculties, "faculty"), "color": "#7C3AED"},
        {"title": "Programmes", "value": _count(ProgrammeService(client).list_programmes, "programmes"),
         "color": "#00CED1"},
    ]
