"""Interactive move handler: user-directed station reassignment."""

import logging
from collections.abc import Sequence

from team_allocation.domain.errors import InvalidMoveError, LockedTeamError
from team_allocation.domain.models.station import Station
from team_allocation.domain.models.team import Team

logger = logging.getLogger(__name__)


def _index_of_team(teams: Sequence[Team], team_id: str) -> int:
    for i, team in enumerate(teams):
        if team.id == team_id:
            return i
    raise InvalidMoveError(f"Unknown team '{team_id}'")


def move_station(
    teams: Sequence[Team],
    station: Station,
    from_team_id: str,
    to_team_id: str,
    *,
    enforce_locks: bool = False,
) -> list[Team]:
    """Move a station from one team to another.

    Returns a new team list; the caller's list and Team objects are left
    untouched. Both affected teams are rebuilt from their new membership, so
    their load and travel distance are recomputed rather than adjusted. No
    load ceiling is applied here.

    Args:
        teams: Current teams.
        station: Station to move (matched by code).
        from_team_id: Team the station currently belongs to.
        to_team_id: Team that receives the station.
        enforce_locks: Treat locked teams as immovable. Locks are advisory by default.

    Returns:
        New list of teams with the move applied.

    Raises:
        InvalidMoveError: Same source and target, unknown team, or station not in the source team.
        LockedTeamError: enforce_locks is set and either team is locked.
    """
    if from_team_id == to_team_id:
        raise InvalidMoveError(f"Station {station.code} is already in team '{to_team_id}'")

    from_idx = _index_of_team(teams, from_team_id)
    to_idx = _index_of_team(teams, to_team_id)
    source = teams[from_idx]
    target = teams[to_idx]

    if not source.contains(station.code):
        raise InvalidMoveError(f"Station {station.code} is not a member of team '{from_team_id}'")

    if enforce_locks:
        for team in (source, target):
            if team.locked:
                raise LockedTeamError(team.id)

    moved = next(s for s in source.members if s.code == station.code)
    result = list(teams)
    result[from_idx] = source.with_members([s for s in source.members if s.code != station.code])
    result[to_idx] = target.with_members([*target.members, moved])

    logger.info(
        f"Moved station {station.code} from {from_team_id} "
        f"({source.aggregate_weight} -> {result[from_idx].aggregate_weight}) to {to_team_id} "
        f"({target.aggregate_weight} -> {result[to_idx].aggregate_weight})"
    )
    return result


def set_team_lock(teams: Sequence[Team], team_id: str, locked: bool) -> list[Team]:
    """Return a new team list with the advisory lock flag of one team set."""
    idx = _index_of_team(teams, team_id)
    result = list(teams)
    result[idx] = teams[idx].with_lock(locked)
    return result
