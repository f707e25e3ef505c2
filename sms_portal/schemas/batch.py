from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from sms_portal.schemas.common import require_text


class Semester(str, Enum):
    SPRING = "SPRING"
    AUTUMN = "AUTUMN"


class Batch(BaseModel):
    batch_id: int
    batch_name: str
    start_year: int
    start_semester: Semester
    is_active: bool = True

    programme_id: Optional[int] = None
    programme_name: Optional[str] = None
    department_code: Optional[str] = None
    department_name: Optional[str] = None


class BatchCreate(BaseModel):
    programme_id: int
    batch_name: str
    start_year: int
    start_semester: Semester

    @field_validator("batch_name")
    @classmethod
    def name_required(cls, value):
        return require_text(value, "Batch name is required")


class BatchUpdate(BaseModel):
    batch_name: str
    start_year: Optional[int] = None
    start_semester: Optional[Semester] = None
    is_active: Optional[bool] = None

    @field_validator("batch_name")
    @classmethod
    def name_required(cls, value):
        return require_text(value, "Batch name is required")
