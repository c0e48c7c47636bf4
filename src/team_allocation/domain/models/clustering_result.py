"""Clustering run result domain model."""

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, ConfigDict

from team_allocation.domain.models.load_bounds import LoadBounds
from team_allocation.domain.models.team import Team


class FallbackAssignment(BaseModel):
    """A leftover station placed on the lowest-load team above max_load.

    Records a documented deviation from the load ceiling so it can be
    reported and reproduced.
    """

    model_config = ConfigDict(frozen=True)

    station_code: str
    team_id: str
    resulting_load: int
    max_load: float


@dataclass(frozen=True)
class ClusteringResult:
    """Outcome of one clustering invocation, owned by the caller.

    Replaces any process-wide "processing" flag: every run produces its own
    status value together with the teams and the bookkeeping behind them.
    """

    status: Literal["completed", "empty"]
    teams: list[Team] = field(default_factory=list)
    bounds: LoadBounds | None = None
    fallback_assignments: list[FallbackAssignment] = field(default_factory=list)
    rebalance_passes: int = 0
    swaps_applied: int = 0

    @property
    def total_weight(self) -> int:
        """Sum of all team loads."""
        return sum(team.aggregate_weight for team in self.teams)
