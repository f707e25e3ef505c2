from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from sms_portal.schemas.common import blank_to_none, require_text


class AddressType(str, Enum):
    CURRENT = "current"
    PERMANENT = "permanent"


class StudentProfile(BaseModel):
    user_id: int
    is_part_time: Optional[bool] = None
    roll_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    self_phone_number: Optional[str] = None
    guardian_phone_number: Optional[str] = None
    is_approved_admission: Optional[bool] = None
    batch_id: Optional[int] = None
    department_id: Optional[int] = None
    current_address_id: Optional[int] = None
    permanent_address_id: Optional[int] = None

    # joined for display
    full_name: Optional[str] = None
    email: Optional[str] = None
    is_active: Optional[bool] = None
    department_name: Optional[str] = None
    department_code: Optional[str] = None
    batch_name: Optional[str] = None
    programme_name: Optional[str] = None
    level_name: Optional[str] = None


class FacultyProfile(BaseModel):
    user_id: int
    phone_number: Optional[str] = None
    specialization: Optional[str] = None
    department_id: Optional[int] = None

    full_name: Optional[str] = None
    email: Optional[str] = None
    is_active: Optional[bool] = None
    department_name: Optional[str] = None
    department_code: Optional[str] = None


class Address(BaseModel):
    address_id: Optional[int] = None
    user_id: int
    address_line_1: str
    address_line_2: Optional[str] = None
    city: str
    state: str
    postal_code: str
    country: str

    def one_line(self) -> str:
        parts = [
            self.address_line_1,
            self.address_line_2,
            self.city,
            self.state,
            self.postal_code,
            self.country,
        ]
        return ", ".join(p for p in parts if p)


def _min_phone(value, message):
    value = blank_to_none(value)
    if value is not None and len(value) < 10:
        raise ValueError(message)
    return value


class StudentProfileForm(BaseModel):
    is_part_time: Optional[bool] = None
    roll_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    self_phone_number: Optional[str] = None
    guardian_phone_number: Optional[str] = None
    batch_id: Optional[int] = None

    @field_validator("roll_number")
    @classmethod
    def roll_number_not_blank(cls, value):
        # may be omitted, but not sent empty
        if value is None:
            return None
        return require_text(value, "Roll number is required")

    @field_validator("self_phone_number")
    @classmethod
    def valid_phone(cls, value):
        return _min_phone(value, "Invalid phone number")

    @field_validator("guardian_phone_number")
    @classmethod
    def valid_guardian_phone(cls, value):
        return _min_phone(value, "Invalid guardian phone number")


class FacultyProfileForm(BaseModel):
    phone_number: Optional[str] = None
    specialization: Optional[str] = None

    @field_validator("phone_number")
    @classmethod
    def valid_phone(cls, value):
        return _min_phone(value, "Invalid phone number")

    @field_validator("specialization")
    @classmethod
    def valid_specialization(cls, value):
        value = blank_to_none(value)
        if value is not None and len(value) < 2:
            raise ValueError("Specialization must be at least 2 characters")
        return value


class AddressForm(BaseModel):
    address_line_1: str
    address_line_2: Optional[str] = None
    city: str
    state: str
    postal_code: str
    country: str

    @field_validator("address_line_1")
    @classmethod
    def line_1_required(cls, value):
        return require_text(value, "Address line 1 is required")

    @field_validator("address_line_2")
    @classmethod
    def strip_line_2(cls, value):
        return blank_to_none(value)

    @field_validator("city")
    @classmethod
    def city_required(cls, value):
        return require_text(value, "City is required")

    @field_validator("state")
    @classmethod
    def state_required(cls, value):
        return require_text(value, "State is required")

    @field_validator("postal_code")
    @classmethod
    def postal_code_required(cls, value):
        return require_text(value, "Postal code is required")

    @field_validator("country")
    @classmethod
    def country_required(cls, value):
        return require_text(value, "Country is required")
