"""CLI entrypoint for minutes-judge: typer app with summarize, evaluate and run commands."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import structlog
import typer
from rich.console import Console

from minutes_judge.cli.example_transcript import EXAMPLE_TRANSCRIPT
from minutes_judge.cli.render.scorecard import render_scorecard, render_summary
from minutes_judge.config.domain.config import AppConfig
from minutes_judge.config.infrastructure.observer import StructlogConfigObserver
from minutes_judge.config.infrastructure.yaml_loader import YamlConfigLoader
from minutes_judge.core.errors import MinutesJudgeError
from minutes_judge.evaluation.domain.edit_session import EvaluationEditSession
from minutes_judge.evaluation.infrastructure.observer import (
    StructlogEditSessionObserver,
)
from minutes_judge.judge.infrastructure.litellm import LiteLLMJudge
from minutes_judge.judge.infrastructure.observer import StructlogJudgeObserver
from minutes_judge.pipeline.application.controller import PipelineController
from minutes_judge.pipeline.infrastructure.observer import StructlogPipelineObserver
from minutes_judge.summary.infrastructure.litellm import LiteLLMSummaryGenerator
from minutes_judge.summary.infrastructure.observer import StructlogSummaryObserver

app = typer.Typer(
    add_completion=False,
    help="Summarize meeting transcripts and score the summary with an LLM judge.",
)

_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    dir_okay=False,
    help="Path to a YAML config file (defaults are used when omitted)",
)
_LOG_FORMAT_OPTION = typer.Option(
    "console",
    "--log-format",
    help="Log format: 'console' or 'json'",
)
_JSON_OPTION = typer.Option(
    False,
    "--json",
    help="Print the evaluation as JSON instead of a scorecard",
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        _fail(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    sys.exit(1)


def _load_config(config_path: Path | None) -> AppConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    if config_path is None:
        return loader.load_default()
    return loader.load(path=config_path)


def _read_text(path: Path | None, fallback: str | None = None) -> str:
    if path is None:
        if fallback is None:
            _fail("Failed to read input: no file given")
        return fallback
    return path.read_text(encoding="utf-8")


def _build_controller(config: AppConfig, transcript: str) -> PipelineController:
    """Wire the LiteLLM adapters and structlog observers into a controller."""
    return PipelineController(
        generator=LiteLLMSummaryGenerator(
            config=config.generator,
            observer=StructlogSummaryObserver(),
        ),
        judge=LiteLLMJudge(config=config.judge, observer=StructlogJudgeObserver()),
        observer=StructlogPipelineObserver(),
        edit_observer=StructlogEditSessionObserver(),
        transcript=transcript,
    )


def _generate(controller: PipelineController) -> None:
    if not asyncio.run(controller.start_generation()):
        _fail("Failed to generate summary: transcript is blank")
    if controller.last_error is not None:
        _fail(str(controller.last_error))


def _evaluate(controller: PipelineController) -> None:
    if not asyncio.run(controller.start_evaluation()):
        _fail("Failed to evaluate summary: transcript and summary must not be blank")
    if controller.last_error is not None:
        _fail(str(controller.last_error))


def _review(session: EvaluationEditSession) -> None:
    """Walk every scorecard field through prompts, then commit or discard."""
    if not session.begin_edit() or session.working_copy is None:
        return

    for name, metric in session.working_copy.metrics():
        label = name.value.capitalize()
        score = typer.prompt(f"{label} score", default=metric.score, type=int)
        if score != metric.score:
            session.set_metric_score(name, score)
        reasoning = typer.prompt(f"{label} reasoning", default=metric.reasoning)
        if reasoning != metric.reasoning:
            session.set_metric_reasoning(name, reasoning)

    working = session.working_copy
    overall_score = typer.prompt(
        "Overall score", default=working.overall_score, type=int
    )
    if overall_score != working.overall_score:
        session.set_overall_score(overall_score)
    overall_comment = typer.prompt("Overall comment", default=working.overall_comment)
    if overall_comment != working.overall_comment:
        session.set_overall_comment(overall_comment)

    if session.is_dirty and typer.confirm("Save changes to the scorecard?", default=True):
        session.commit()
    else:
        session.discard()


def _print_evaluation(controller: PipelineController, as_json: bool) -> None:
    evaluation = controller.evaluation
    if evaluation is None:
        _fail("Failed to evaluate summary: no evaluation available")
    if as_json:
        typer.echo(json.dumps(evaluation.to_payload(), indent=2))
        return
    Console().print(render_scorecard(evaluation))


@app.command()
def summarize(
    transcript_path: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="Transcript text file (the built-in example is used when omitted)",
    ),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    raw: bool = typer.Option(False, "--raw", help="Print the markdown unrendered"),
) -> None:
    """Generate structured meeting minutes from a transcript."""
    try:
        _configure_structlog(log_format=log_format)
        config = _load_config(config_path=config_path)
        transcript = _read_text(path=transcript_path, fallback=EXAMPLE_TRANSCRIPT)

        controller = _build_controller(config=config, transcript=transcript)
        _generate(controller)

        if raw:
            typer.echo(controller.summary)
        else:
            Console().print(render_summary(controller.summary))

    except KeyboardInterrupt:
        _fail("Summarization interrupted.")
    except MinutesJudgeError as exc:
        _fail(str(exc))
    except Exception as exc:  # noqa: BLE001
        _fail(f"Unexpected error: {exc}\nPlease report this bug.")


@app.command()
def evaluate(
    transcript_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Transcript text file"
    ),
    summary_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Summary markdown file to judge"
    ),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    as_json: bool = _JSON_OPTION,
) -> None:
    """Score an existing summary against its transcript."""
    try:
        _configure_structlog(log_format=log_format)
        config = _load_config(config_path=config_path)
        transcript = _read_text(path=transcript_path)
        summary = _read_text(path=summary_path)

        controller = _build_controller(config=config, transcript=transcript)
        controller.set_summary(summary)
        _evaluate(controller)
        _print_evaluation(controller=controller, as_json=as_json)

    except KeyboardInterrupt:
        _fail("Evaluation interrupted.")
    except MinutesJudgeError as exc:
        _fail(str(exc))
    except Exception as exc:  # noqa: BLE001
        _fail(f"Unexpected error: {exc}\nPlease report this bug.")


@app.command()
def run(
    transcript_path: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="Transcript text file (the built-in example is used when omitted)",
    ),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    as_json: bool = _JSON_OPTION,
    edit_summary: bool = typer.Option(
        False,
        "--edit-summary",
        help="Open the generated summary in $EDITOR before judging it",
    ),
    review: bool = typer.Option(
        False,
        "--review",
        help="Hand-tune the scorecard interactively before printing it",
    ),
) -> None:
    """Generate minutes from a transcript, then judge them."""
    try:
        _configure_structlog(log_format=log_format)
        config = _load_config(config_path=config_path)
        transcript = _read_text(path=transcript_path, fallback=EXAMPLE_TRANSCRIPT)

        controller = _build_controller(config=config, transcript=transcript)
        _generate(controller)

        if edit_summary:
            edited = typer.edit(controller.summary, extension=".md")
            if edited is not None:
                controller.set_summary(edited)

        if not as_json:
            Console().print(render_summary(controller.summary))

        _evaluate(controller)

        if review:
            draft = controller.evaluation
            if draft is not None and not as_json:
                Console().print(render_scorecard(draft, title="Draft Scorecard"))
            _review(controller.edit_session)

        _print_evaluation(controller=controller, as_json=as_json)

    except KeyboardInterrupt:
        _fail("Run interrupted.")
    except MinutesJudgeError as exc:
        _fail(str(exc))
    except Exception as exc:  # noqa: BLE001
        _fail(f"Unexpected error: {exc}\nPlease report this bug.")


if __name__ == "__main__":
    app()
