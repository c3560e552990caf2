from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

# --- Players ---
class PlayerModel(BaseModel):
    id: int | None = None
    name: str | None = None
    position: str | None = None


# --- Teams ---
class TeamCreateRequest(BaseModel):
    # Accepted for shape compatibility; the store always assigns a new id.
    id: int | None = None
    name: str | None = Field(default=None, validate_default=True)
    acronym: str | None = Field(default=None, validate_default=True)
    budget: float | None = Field(default=None, validate_default=True, allow_inf_nan=False)
    players: list[PlayerModel] | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            raise PydanticCustomError("team_name_required", "Team name is required")
        return v

    @field_validator("acronym")
    @classmethod
    def acronym_not_blank(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            raise PydanticCustomError("acronym_required", "Acronym is required")
        return v

    @field_validator("budget")
    @classmethod
    def budget_present_and_positive(cls, v: float | None) -> float | None:
        if v is None:
            raise PydanticCustomError("budget_required", "Budget is required")
        if v < 0:
            raise PydanticCustomError("budget_negative", "Budget must be a positive value")
        return v


class TeamResponse(BaseModel):
    id: int | None
    name: str
    acronym: str
    budget: float | None
    players: list[PlayerModel] = []


class TeamPageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: list[TeamResponse]
    total_elements: int = Field(alias="totalElements")
    total_pages: int = Field(alias="totalPages")
    number: int
    size: int
    number_of_elements: int = Field(alias="numberOfElements")
    first: bool
    last: bool
    empty: bool


# --- Errors ---
class NotFoundResponse(BaseModel):
    timestamp: datetime
    status: int
    message: str


class ValidationErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    errors: dict[str, str]
