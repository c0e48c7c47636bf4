"""Local-search rebalancer settings domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RebalanceSettings:
    """Tuning knobs for the pairwise-swap rebalancer.

    Total cost is bounded by max_passes * teams^2 * candidate_limit^2 swap evaluations.
    """

    enabled: bool = True
    max_passes: int = 60
    candidate_limit: int = 12  # Per team, half farthest and half nearest to the centroid
    hard_penalty_weight: float = 1000.0  # Dominates so load-range violations are fixed first
    load_weight: float = 1.0
    spread_weight: float = 1.0
