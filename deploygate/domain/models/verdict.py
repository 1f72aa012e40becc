"""Validation verdict models.

A verdict is produced once per ``validate_paths`` call and consumed by the
dispatcher straight away: proceed with ``path`` or exit with ``exit_code``.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ValidVerdict(BaseModel):
    """Deployment may proceed with ``path``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    valid: Literal[True] = True
    path: str


class InvalidVerdict(BaseModel):
    """Deployment must stop; the process should exit with ``exit_code``.

    ``exit_code`` 0 means the user cancelled, anything else is a failure.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    valid: Literal[False] = False
    exit_code: int = Field(ge=0)

    @property
    def cancelled(self) -> bool:
        return self.exit_code == 0


Verdict = Annotated[Union[ValidVerdict, InvalidVerdict], Field(discriminator="valid")]
