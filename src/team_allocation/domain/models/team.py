"""Team domain model."""

from dataclasses import dataclass, field

from team_allocation.domain.geometry import estimate_travel_distance
from team_allocation.domain.models.station import Station


@dataclass(frozen=True)
class Team:
    """A named partition of stations assigned to one crew.

    ``aggregate_weight`` and ``travel_distance_estimate`` are derived from
    ``members`` when the team is built and cannot be passed in, so they always
    describe the actual membership. Changing membership means building a new Team.
    """

    id: str
    display_name: str
    members: tuple[Station, ...] = ()
    locked: bool = False  # Advisory only, see move_station(enforce_locks=...)
    aggregate_weight: int = field(init=False)
    travel_distance_estimate: float = field(init=False)

    def __post_init__(self) -> None:
        members = tuple(self.members)
        object.__setattr__(self, "members", members)
        object.__setattr__(self, "aggregate_weight", sum(s.weight for s in members))
        object.__setattr__(
            self,
            "travel_distance_estimate",
            estimate_travel_distance([(s.latitude, s.longitude) for s in members]),
        )

    @property
    def station_count(self) -> int:
        """Number of member stations."""
        return len(self.members)

    def contains(self, station_code: str) -> bool:
        """Check whether a station with the given code is a member."""
        return any(s.code == station_code for s in self.members)

    def with_members(self, members: tuple[Station, ...] | list[Station]) -> "Team":
        """Return a copy of this team with a new membership (derived fields recomputed)."""
        return Team(
            id=self.id,
            display_name=self.display_name,
            members=tuple(members),
            locked=self.locked,
        )

    def with_lock(self, locked: bool) -> "Team":
        """Return a copy of this team with the advisory lock flag set."""
        return Team(
            id=self.id,
            display_name=self.display_name,
            members=self.members,
            locked=locked,
        )
