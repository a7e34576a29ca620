"""Structlog implementation of the EditSessionObserver port."""

import structlog


class StructlogEditSessionObserver:
    """Delegates edit session events to structlog.

    Satisfies the EditSessionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def edit_started(self) -> None:
        self._log.info("edit_session.started")

    def edit_field_changed(self, field: str) -> None:
        self._log.debug("edit_session.field_changed", field=field)

    def edit_committed(self, changed_fields: list[str]) -> None:
        self._log.info("edit_session.committed", changed_fields=changed_fields)

    def edit_discarded(self, changed_fields: list[str]) -> None:
        self._log.info("edit_session.discarded", changed_fields=changed_fields)

    def edit_reset(self, had_pending_edits: bool) -> None:
        self._log.warning(
            "edit_session.reset",
            had_pending_edits=had_pending_edits,
            message="Authoritative evaluation replaced while editing",
        )
