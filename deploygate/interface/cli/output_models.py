from typing import Literal
from pydantic import BaseModel, Field


class BaseOutput(BaseModel):
    schema_version: int = 1
    command: Literal["check"]
    exit_code: int
    error: str | None = None


class CheckOutput(BaseOutput):
    command: Literal["check"] = "check"
    # Omitted via exclude_none when validation fails.
    path: str | None = None
    root_directory: str | None = None
    cancelled: bool = False
    messages: list[str] = Field(default_factory=list)
