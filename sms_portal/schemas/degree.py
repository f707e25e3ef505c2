from pydantic import BaseModel, field_validator

from sms_portal.schemas.common import require_text


class DegreeLevel(BaseModel):
    degree_level_id: int
    level_name: str


class DegreeForm(BaseModel):
    level_name: str

    @field_validator("level_name")
    @classmethod
    def name_required(cls, value):
        return require_text(value, "Degree level name is required")
