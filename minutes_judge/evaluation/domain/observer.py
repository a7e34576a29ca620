"""Observer port for the edit session: events in domain language."""

from typing import Protocol


class EditSessionObserver(Protocol):
    """Observer port for manual scorecard edits.

    Implementations may log to structlog or record for tests.
    """

    def edit_started(self) -> None: ...

    def edit_field_changed(self, field: str) -> None: ...

    def edit_committed(self, changed_fields: list[str]) -> None: ...

    def edit_discarded(self, changed_fields: list[str]) -> None: ...

    def edit_reset(self, had_pending_edits: bool) -> None: ...
