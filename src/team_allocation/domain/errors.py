"""Domain errors."""


class InvalidMoveError(ValueError):
    """Raised when a station move violates its preconditions."""


class LockedTeamError(InvalidMoveError):
    """Raised when a move touches a locked team and locks are enforced."""

    def __init__(self, team_id: str) -> None:
        super().__init__(f"Team '{team_id}' is locked")
        self.team_id = team_id
