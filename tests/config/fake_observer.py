"""Fake ConfigObserver for use in tests: records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, str]] = []
        self.warnings: list[float] = []

    def config_loaded(self, path: str, generator_model: str, judge_model: str) -> None:
        self.loaded.append(
            {"path": path, "generator_model": generator_model, "judge_model": judge_model}
        )

    def config_judge_temperature_warning(self, temperature: float) -> None:
        self.warnings.append(temperature)
