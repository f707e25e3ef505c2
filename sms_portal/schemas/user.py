from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Role(str, Enum):
    ADMIN = "ADMIN"
    HOD = "HOD"
    FACULTY = "FACULTY"
    STAFF = "STAFF"
    STUDENT = "STUDENT"

    @classmethod
    def parse(cls, value) -> Optional["Role"]:
        """Case-insensitive lookup; unknown roles give None."""
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return None


# Roles listed on the Users admin page; students are managed elsewhere
STAFF_ROLES = (Role.ADMIN, Role.HOD, Role.STAFF, Role.FACULTY)


class User(BaseModel):
    user_id: int
    user_type: str
    full_name: Optional[str] = None
    email: str
    is_active: bool = True

    department_id: Optional[int] = None
    department_name: Optional[str] = None
    department_code: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email
