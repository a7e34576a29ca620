"""Pipeline phases and the reasons a transition can be refused."""

from enum import StrEnum


class Phase(StrEnum):
    """The controller's current activity. Exactly one is active at a time."""

    IDLE = "idle"
    GENERATING_SUMMARY = "generating_summary"
    EVALUATING = "evaluating"


class GuardRejection(StrEnum):
    """Why a transition or an input edit was refused.

    A refusal is a silent no-op for the state machine; front ends use
    ``can_generate()`` / ``can_evaluate()`` to disable the action instead.
    """

    BUSY = "busy"
    BLANK_TRANSCRIPT = "blank_transcript"
    BLANK_SUMMARY = "blank_summary"
