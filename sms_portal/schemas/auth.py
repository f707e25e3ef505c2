from typing import Optional

from pydantic import BaseModel, field_validator

from sms_portal.schemas.common import check_email
from sms_portal.schemas.user import Role


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def valid_email(cls, value):
        return check_email(value)

    @field_validator("password")
    @classmethod
    def password_present(cls, value):
        if not value:
            raise ValueError("Please enter both email and password")
        return value


class LoginResponse(BaseModel):
    token: str


class UserProfile(BaseModel):
    """Caller identity as returned by /auth/me."""

    user_id: Optional[int] = None
    user_type: str
    email: str
    full_name: Optional[str] = None
    department_id: Optional[int] = None
    is_active: Optional[bool] = None

    @property
    def role(self) -> Optional[Role]:
        return Role.parse(self.user_type)

    @property
    def display_name(self) -> str:
        return self.full_name or self.email
