"""Rich renderables for the judge's scorecard and the generated summary."""

from rich.console import Group, RenderableType
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from minutes_judge.evaluation.domain.metric import (
    DISPLAY_MAX,
    ScoreBand,
    display_fill,
    score_band,
)
from minutes_judge.evaluation.domain.result import EvaluationResult

_BAND_STYLES: dict[ScoreBand, str] = {
    "high": "bright_green",
    "medium": "yellow",
    "low": "red",
}


def score_bar(score: int) -> Text:
    """Render a 10-cell bar for *score*; the fill is clamped, the label is not."""
    style = _BAND_STYLES[score_band(score)]
    filled = display_fill(score)
    return Text.assemble(
        ("█" * filled, style),
        ("░" * (DISPLAY_MAX - filled), "dim white"),
    )


def render_scorecard(
    evaluation: EvaluationResult, title: str = "Judge's Scorecard"
) -> RenderableType:
    """Build the scorecard panel: one row per metric, then the overall verdict."""
    table = Table(show_header=True, header_style="dim", expand=True, box=None)
    table.add_column("Metric", no_wrap=True)
    table.add_column("Score", justify="right", no_wrap=True)
    table.add_column("", no_wrap=True)
    table.add_column("Reasoning", ratio=1)

    for name, metric in evaluation.metrics():
        style = _BAND_STYLES[score_band(metric.score)]
        table.add_row(
            Text(name.value.capitalize(), style="bold"),
            Text(str(metric.score), style=style),
            score_bar(metric.score),
            Text(metric.reasoning or "-", style="default" if metric.reasoning else "dim"),
        )

    overall_style = _BAND_STYLES[score_band(evaluation.overall_score)]
    overall = Text.assemble(
        ("Overall  ", "bold"),
        (f"{evaluation.overall_score}/{DISPLAY_MAX}", f"bold {overall_style}"),
        "  ",
        score_bar(evaluation.overall_score),
    )
    comment = Text(evaluation.overall_comment, style="italic")

    return Panel(
        Group(overall, comment, Text(""), table),
        title=title,
        border_style="cyan",
    )


def render_summary(summary: str) -> RenderableType:
    return Panel(Markdown(summary), title="Meeting Summary", border_style="blue")
