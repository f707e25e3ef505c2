import logging

from sms_portal.schemas.user import STAFF_ROLES, Role, User
from sms_portal.services.base import ResourceService

logger = logging.getLogger(__name__)


def filter_staff_users(users, user_type="ALL", query=""):
    """
    Users shown on the admin Users page: everyone but students,
    optionally narrowed by role and a case-insensitive search on name, email or department.
    """
    filtered = [u for u in users if Role.parse(u.user_type) in STAFF_ROLES]

    if user_type and user_type != "ALL":
        wanted = Role.parse(user_type)
        filtered = [u for u in filtered if Role.parse(u.user_type) == wanted]

    query = (query or "").strip().lower()
    if query:
        filtered = [
            u
            for u in filtered
            if (u.full_name and query in u.full_name.lower())
            or query in u.email.lower()
            or (u.department_name and query in u.department_name.lower())
        ]

    return filtered


class UserService(ResourceService):
    def list_users(self, user_type=None):
        """Admin sees everyone; other roles get their department's users."""
        self.client.require_token()
        role = Role.parse(user_type)
        params = {"type": role.value} if role else None
        data = self.client.get("/users", params=params, default_error="Failed to fetch users")
        return self._many(User, data)

    def list_hods(self):
        return self.list_users(Role.HOD)

    def get_user(self, user_id: int) -> User:
        self.client.require_token()
        data = self.client.get(f"/users/{user_id}", default_error="Failed to fetch user")
        return self._one(User, data)

    def delete_user(self, user_id: int):
        self.client.require_token()
        data = self.client.delete(f"/users/{user_id}", default_error="Failed to delete user")
        logger.info(f"[USERS] deleted {user_id}")
        return data
