"""Processing parameters domain model."""

from pydantic import BaseModel, ConfigDict, Field


class ProcessingParams(BaseModel):
    """Parameters for a clustering run.

    number_of_teams is deliberately unconstrained: a value <= 0 is a normal
    input that produces an empty result rather than a validation error.
    """

    model_config = ConfigDict(frozen=True)

    number_of_teams: int
    tolerance_percent: float = Field(default=10.0, ge=0.0, le=100.0)
