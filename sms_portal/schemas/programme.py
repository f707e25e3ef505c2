from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from sms_portal.schemas.common import require_text


class Programme(BaseModel):
    programme_id: int
    programme_name: str
    minimum_duration_years: int
    maximum_duration_years: int
    is_active: bool = True

    degree_level: Optional[str] = None
    department_code: Optional[str] = None
    department_name: Optional[str] = None


class ProgrammeCreate(BaseModel):
    programme_name: str
    degree_level_id: int
    minimum_duration_years: int
    # Falls back to the minimum when left empty
    maximum_duration_years: Optional[int] = None

    @field_validator("programme_name")
    @classmethod
    def name_required(cls, value):
        return require_text(value, "Programme name is required")

    @field_validator("minimum_duration_years")
    @classmethod
    def positive_minimum(cls, value):
        if value < 1:
            raise ValueError("Minimum duration must be at least 1 year")
        return value

    @model_validator(mode="after")
    def check_durations(self):
        if self.maximum_duration_years is None:
            self.maximum_duration_years = self.minimum_duration_years
        if self.maximum_duration_years < self.minimum_duration_years:
            raise ValueError("Maximum duration cannot be less than minimum duration")
        return self


class ProgrammeUpdate(BaseModel):
    programme_name: str
    minimum_duration_years: Optional[int] = None
    maximum_duration_years: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("programme_name")
    @classmethod
    def name_required(cls, value):
        return require_text(value, "Programme name is required")

    @model_validator(mode="after")
    def check_durations(self):
        low, high = self.minimum_duration_years, self.maximum_duration_years
        if low is not None and low < 1:
            raise ValueError("Minimum duration must be at least 1 year")
        if low is not None and high is not None and high < low:
            raise ValueError("Maximum duration cannot be less than minimum duration")
        return self
