from typing import Optional

from pydantic import BaseModel, field_validator

from sms_portal.schemas.common import blank_to_none, check_email, require_text


class Faculty(BaseModel):
    user_id: int
    user_type: str = "FACULTY"
    full_name: Optional[str] = None
    email: str
    is_active: bool = True
    phone_number: Optional[str] = None
    specialization: Optional[str] = None
    department_code: Optional[str] = None
    department_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        # accounts created from an email only have no name yet
        return self.full_name or self.email


class FacultyCreate(BaseModel):
    """HOD creates a faculty account from an email only; the backend sets the password to the email."""

    email: str

    @field_validator("email")
    @classmethod
    def normalise_email(cls, value):
        require_text(value, "Email is required")
        return check_email(value).lower()


class FacultyUpdate(BaseModel):
    full_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    specialization: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("full_name")
    @classmethod
    def name_required(cls, value):
        return require_text(value, "Full name is required")

    @field_validator("email")
    @classmethod
    def optional_email(cls, value):
        value = blank_to_none(value)
        if value is None:
            return None
        return check_email(value).lower()

    @field_validator("phone_number", "specialization")
    @classmethod
    def strip_optional(cls, value):
        return blank_to_none(value)


class FacultyProfileUpdate(BaseModel):
    phone_number: Optional[str] = None
    specialization: Optional[str] = None

    @field_validator("phone_number", "specialization")
    @classmethod
    def strip_optional(cls, value):
        return blank_to_none(value)


class DeletedFaculty(BaseModel):
    full_name: Optional[str] = None
    email: str

    @property
    def display_name(self) -> str:
        return self.full_name or self.email


class DeleteFacultyResponse(BaseModel):
    message: Optional[str] = None
    deleted_faculty: DeletedFaculty
