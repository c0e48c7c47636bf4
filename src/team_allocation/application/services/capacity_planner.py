"""Capacity planner: per-team load bounds."""

from team_allocation.domain.models.load_bounds import LoadBounds


def plan_load_bounds(
    total_weight: float, number_of_teams: int, tolerance_percent: float
) -> LoadBounds | None:
    """Derive the target load per team and the tolerated range around it.

    Returns None when no meaningful target exists (no teams or nothing to
    distribute); callers treat that as an empty result, not an error.
    """
    if number_of_teams <= 0 or total_weight <= 0:
        return None

    target = total_weight / number_of_teams
    return LoadBounds(
        target=target,
        min_load=target * (1 - tolerance_percent / 100),
        max_load=target * (1 + tolerance_percent / 100),
    )
