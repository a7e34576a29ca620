"""Error types raised by the edit session."""

from minutes_judge.core.errors import MinutesJudgeError


class EditSessionInactiveError(MinutesJudgeError):
    """Raised when a field edit is attempted while no edit is in progress."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Failed to edit '{field}': no edit session is active")
