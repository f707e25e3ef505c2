from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from sms_portal.schemas.common import check_email

MIN_PASSWORD_LENGTH = 8


class ProfileUpdateForm(BaseModel):
    full_name: str
    email: str

    @field_validator("full_name")
    @classmethod
    def valid_name(cls, value):
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Full name must be at least 2 characters")
        return value

    @field_validator("email")
    @classmethod
    def valid_email(cls, value):
        return check_email(value, "Invalid email address")


class PasswordChangeForm(BaseModel):
    current_password: str
    new_password: str
    confirm_password: str

    @field_validator("current_password")
    @classmethod
    def current_required(cls, value):
        if not value:
            raise ValueError("Current password is required")
        return value

    @field_validator("new_password")
    @classmethod
    def new_long_enough(cls, value):
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return value

    @field_validator("confirm_password")
    @classmethod
    def confirm_required(cls, value):
        if not value:
            raise ValueError("Please confirm your new password")
        return value

    @model_validator(mode="after")
    def passwords_match(self):
        if self.new_password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class UpdateProfileRequest(BaseModel):
    """Body of PUT /auth/me. Only fields that are set get sent."""

    full_name: Optional[str] = None
    email: Optional[str] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = None
