from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class PaginationRules(BaseModel):
    default_page: int = Field(default=0, ge=0)
    default_size: int = Field(default=10, ge=1)

class LoggingRules(BaseModel):
    level: LogLevel = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

class OpsRules(BaseModel):
    data_dir_required: bool = True
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    pagination: PaginationRules = Field(default_factory=PaginationRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
    ops: OpsRules = Field(default_factory=OpsRules)
