"""Formatter for allocation results."""

from typing import Any

from team_allocation.domain.models.clustering_result import ClusteringResult
from team_allocation.domain.models.team import Team


class TeamFormatter:
    """Turns teams into plain data and text tables for output."""

    def team_to_dict(self, team: Team) -> dict[str, Any]:
        """Convert a team to a JSON-serializable dict."""
        return {
            "id": team.id,
            "display_name": team.display_name,
            "locked": team.locked,
            "aggregate_weight": team.aggregate_weight,
            "travel_distance_estimate": team.travel_distance_estimate,
            "members": [
                {
                    "code": s.code,
                    "display_name": s.display_name,
                    "latitude": s.latitude,
                    "longitude": s.longitude,
                    "weight": s.weight,
                }
                for s in team.members
            ],
        }

    def result_to_dict(self, result: ClusteringResult) -> dict[str, Any]:
        """Convert a clustering result to a JSON-serializable dict."""
        bounds = None
        if result.bounds is not None:
            bounds = {
                "target": round(result.bounds.target, 2),
                "min_load": round(result.bounds.min_load, 2),
                "max_load": round(result.bounds.max_load, 2),
            }
        return {
            "status": result.status,
            "bounds": bounds,
            "total_weight": result.total_weight,
            "teams": [self.team_to_dict(team) for team in result.teams],
            "fallback_assignments": [f.model_dump() for f in result.fallback_assignments],
            "rebalance_passes": result.rebalance_passes,
            "swaps_applied": result.swaps_applied,
        }

    def team_rows(self, teams: list[Team]) -> list[dict[str, Any]]:
        """Flatten teams into one row per member station, team columns first."""
        return [
            {
                "Team_ID": team.id,
                "Team_Name": team.display_name,
                "Team_Total_SL": team.aggregate_weight,
                "Team_Distance_KM": team.travel_distance_estimate,
                "MA_TRAM": s.code,
                "SL_VITRI": s.weight,
                "LAT": s.latitude,
                "LNG": s.longitude,
            }
            for team in teams
            for s in team.members
        ]

    def format_table(self, teams: list[Team]) -> list[str]:
        """Format teams as text table lines: team, station count, load, distance."""
        name_width = max([len("Team"), *(len(t.display_name) for t in teams)])
        lines = [f"{'Team':<{name_width}}  {'Stations':>8}  {'Load':>8}  {'Distance (km)':>13}"]
        lines.append("-" * len(lines[0]))
        for team in teams:
            lock = " [locked]" if team.locked else ""
            lines.append(
                f"{team.display_name:<{name_width}}  {team.station_count:>8}  "
                f"{team.aggregate_weight:>8}  {team.travel_distance_estimate:>13.2f}{lock}"
            )
        return lines

    def format_members(self, team: Team) -> str:
        """Format the member codes of a team as a comma-separated list."""
        return ", ".join(s.code for s in team.members)
