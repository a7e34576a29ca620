"""Tests for StructlogJudgeObserver."""

from structlog.testing import capture_logs

from minutes_judge.judge.infrastructure.observer import StructlogJudgeObserver


class TestStructlogJudgeObserver:
    def test_started_and_completed(self) -> None:
        observer = StructlogJudgeObserver()

        with capture_logs() as logs:
            observer.judge_evaluation_started(
                model="m", transcript_chars=120, summary_chars=40
            )
            observer.judge_evaluation_completed(
                model="m", duration_ms=900, overall_score=8
            )

        assert logs[0]["event"] == "judge.evaluation_started"
        assert logs[0]["summary_chars"] == 40
        assert logs[1]["overall_score"] == 8

    def test_failure_is_error(self) -> None:
        observer = StructlogJudgeObserver()

        with capture_logs() as logs:
            observer.judge_evaluation_failed(model="m", reason="timeout")

        assert logs == [
            {
                "event": "judge.evaluation_failed",
                "log_level": "error",
                "model": "m",
                "reason": "timeout",
            }
        ]

    def test_temperature_warning(self) -> None:
        observer = StructlogJudgeObserver()

        with capture_logs() as logs:
            observer.judge_high_temperature_warned(model="m", temperature=0.5)

        assert logs[0]["log_level"] == "warning"
        assert logs[0]["temperature"] == 0.5
