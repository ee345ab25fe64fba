"""BDD step definitions for the monitored division features."""

import io
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, then, when

from opmonitor.adapters.storage.in_memory import InMemoryLogSink
from opmonitor.cli import main
from opmonitor.config import MonitorConfig
from opmonitor.core.encoding.text_line import LINE_PATTERN
from opmonitor.core.logs import SystemLogger
from opmonitor.core.models import OperationOutcome, TallySnapshot
from opmonitor.core.monitor import SystemMonitor
from opmonitor.runtime.batch import run_batch
from opmonitor.runtime.demo import DEMO_PAIRS, run_trial


@dataclass
class ScenarioContext:
    """Shared state between steps in a scenario."""

    sink: InMemoryLogSink = field(default_factory=InMemoryLogSink)
    monitor: SystemMonitor | None = None
    logger: SystemLogger | None = None
    outcomes: list[OperationOutcome] = field(default_factory=list)
    log_path: str = ""


@pytest.fixture
def ctx() -> ScenarioContext:
    """Fresh scenario context for each test."""
    return ScenarioContext()


def _read_lines(ctx: ScenarioContext) -> list[str]:
    return Path(ctx.log_path).read_text(encoding="utf-8").splitlines()


# === Given ===
@given("a fresh monitor")
def given_fresh_monitor(ctx: ScenarioContext) -> None:
    ctx.logger = SystemLogger(ctx.sink)
    ctx.monitor = SystemMonitor(ctx.logger)


@given("an empty log file")
def given_empty_log_file(ctx: ScenarioContext, tmp_path: Path) -> None:
    ctx.log_path = str(tmp_path / "system.log")


# === When ===
@when(parsers.parse("{a:g} is divided by {b:g}"))
def when_divided(ctx: ScenarioContext, a: float, b: float) -> None:
    outcome = run_trial(
        a, b, ctx.logger, ctx.monitor, out=io.StringIO(), err=io.StringIO()
    )
    ctx.outcomes.append(outcome)


@when("the demonstration batch is run")
def when_demo_batch(ctx: ScenarioContext) -> None:
    ctx.outcomes = run_batch(
        DEMO_PAIRS,
        ctx.logger,
        ctx.monitor,
        out=io.StringIO(),
        err=io.StringIO(),
        sleep=lambda seconds: None,
    )


@when("the program runs to completion")
def when_program_runs(ctx: ScenarioContext, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(MonitorConfig(log_path=ctx.log_path, pacing_delay=0)) == 0
    capsys.readouterr()


# === Then ===
@then(parsers.parse("the operation fails with {error_name}"))
def then_fails_with(ctx: ScenarioContext, error_name: str) -> None:
    outcome = ctx.outcomes[-1]
    assert not outcome.succeeded
    assert type(outcome.error).__name__ == error_name


@then(parsers.parse("the result is {value:g}"))
def then_result_is(ctx: ScenarioContext, value: float) -> None:
    assert ctx.outcomes[-1].value == value


@then(
    parsers.parse(
        "the tally is {total:d} total, {successes:d} successes, {failures:d} failures"
    )
)
def then_tally_is(
    ctx: ScenarioContext, total: int, successes: int, failures: int
) -> None:
    assert ctx.monitor.snapshot() == TallySnapshot(total, successes, failures)


@then(parsers.parse("the batch results are {values}"))
def then_batch_results(ctx: ScenarioContext, values: str) -> None:
    expected = [float(v) for v in values.split(", ")]
    assert [o.value for o in ctx.outcomes if o.succeeded] == expected


@then(parsers.parse('the log file has exactly {count:d} "{message}" entries'))
def then_log_has_entries(ctx: ScenarioContext, count: int, message: str) -> None:
    messages = [LINE_PATTERN.match(line)["message"] for line in _read_lines(ctx)]
    assert messages.count(message) == count


@then("every log line matches the fixed format")
def then_lines_match_format(ctx: ScenarioContext) -> None:
    lines = _read_lines(ctx)
    assert lines
    assert all(LINE_PATTERN.match(line) for line in lines)
