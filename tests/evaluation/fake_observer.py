"""FakeEditSessionObserver: records edit session events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditCommittedEvent:
    changed_fields: list[str]


@dataclass(frozen=True)
class EditDiscardedEvent:
    changed_fields: list[str]


@dataclass(frozen=True)
class EditResetEvent:
    had_pending_edits: bool


class FakeEditSessionObserver:
    """Records all emitted edit session events without mocking or patching."""

    def __init__(self) -> None:
        self.started: int = 0
        self.fields_changed: list[str] = []
        self.committed: list[EditCommittedEvent] = []
        self.discarded: list[EditDiscardedEvent] = []
        self.resets: list[EditResetEvent] = []

    def edit_started(self) -> None:
        self.started += 1

    def edit_field_changed(self, field: str) -> None:
        self.fields_changed.append(field)

    def edit_committed(self, changed_fields: list[str]) -> None:
        self.committed.append(EditCommittedEvent(changed_fields=changed_fields))

    def edit_discarded(self, changed_fields: list[str]) -> None:
        self.discarded.append(EditDiscardedEvent(changed_fields=changed_fields))

    def edit_reset(self, had_pending_edits: bool) -> None:
        self.resets.append(EditResetEvent(had_pending_edits=had_pending_edits))
