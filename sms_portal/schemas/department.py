import re
from typing import Optional

from pydantic import BaseModel, field_validator

from sms_portal.schemas.common import check_email

DEPARTMENT_CODE_RE = re.compile(r"^[A-Z0-9]+$")


class Department(BaseModel):
    department_id: int
    department_code: str
    department_name: str
    hod_name: Optional[str] = None
    hod_email: Optional[str] = None


class DepartmentForm(BaseModel):
    """Create/edit form for a department. Same rules apply to both."""

    department_code: str
    department_name: str
    hod_email: str

    @field_validator("department_code")
    @classmethod
    def valid_code(cls, value):
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Department code must be at least 2 characters")
        if len(value) > 10:
            raise ValueError("Department code must not exceed 10 characters")
        if not DEPARTMENT_CODE_RE.match(value):
            raise ValueError("Department code must contain only uppercase letters and numbers")
        return value

    @field_validator("department_name")
    @classmethod
    def valid_name(cls, value):
        value = value.strip()
        if len(value) < 5:
            raise ValueError("Department name must be at least 5 characters")
        if len(value) > 100:
            raise ValueError("Department name must not exceed 100 characters")
        return value

    @field_validator("hod_email")
    @classmethod
    def valid_hod_email(cls, value):
        if not (value or "").strip():
            raise ValueError("HOD email is required")
        return check_email(value)


class CreateDepartmentResponse(BaseModel):
    message: Optional[str] = None
    department_id: Optional[int] = None
    department_code: Optional[str] = None
    department_name: Optional[str] = None
    hod_email: Optional[str] = None
