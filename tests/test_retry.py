from __future__ import annotations

import asyncio
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from saturn.core.retry import retry_on_condition


class FlakyOperation:
    """Replays scripted outcomes; exceptions are raised, values returned."""

    def __init__(self, outcomes: list[object]) -> None:
        self._outcomes = list(outcomes)
        self.calls = 0

    async def __call__(self) -> object:
        index = min(self.calls, len(self._outcomes) - 1)
        self.calls += 1
        outcome = self._outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _recording_sleep(waits: list[float]):
    async def sleep(seconds: float) -> None:
        waits.append(seconds)

    return sleep


def test_always_failing_operation_runs_max_retries_plus_one_times():
    operation = FlakyOperation([RuntimeError("boom")])
    waits: list[float] = []

    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(
            retry_on_condition(operation, lambda result: not result, 3, 0.5, sleep=_recording_sleep(waits))
        )

    assert operation.calls == 4
    assert waits == [0.5, 0.5, 0.5]


def test_unsatisfactory_result_is_returned_once_retries_are_spent():
    operation = FlakyOperation([[]])
    waits: list[float] = []

    result = asyncio.run(
        retry_on_condition(operation, lambda result: not result, 3, 5, sleep=_recording_sleep(waits))
    )

    assert result == []
    assert operation.calls == 4
    assert waits == [5, 5, 5]


@pytest.mark.parametrize("ready_on_attempt", [1, 2, 4])
def test_satisfactory_result_stops_further_attempts(ready_on_attempt):
    outcomes: list[object] = [[] for _ in range(ready_on_attempt - 1)] + [["row"]]
    operation = FlakyOperation(outcomes)
    waits: list[float] = []

    result = asyncio.run(
        retry_on_condition(operation, lambda result: not result, 3, 1, sleep=_recording_sleep(waits))
    )

    assert result == ["row"]
    assert operation.calls == ready_on_attempt
    assert len(waits) == ready_on_attempt - 1


def test_fault_then_data_recovers():
    operation = FlakyOperation([ConnectionError("down"), ConnectionError("down"), ["row"]])

    result = asyncio.run(
        retry_on_condition(operation, lambda result: not result, 3, 0, sleep=_recording_sleep([]))
    )

    assert result == ["row"]
    assert operation.calls == 3


def test_fault_on_final_attempt_propagates_even_after_empty_results():
    operation = FlakyOperation([[], [], [], ValueError("bad body")])

    with pytest.raises(ValueError, match="bad body"):
        asyncio.run(
            retry_on_condition(operation, lambda result: not result, 3, 0, sleep=_recording_sleep([]))
        )

    assert operation.calls == 4


def test_zero_retries_makes_a_single_attempt():
    operation = FlakyOperation([[]])
    waits: list[float] = []

    result = asyncio.run(
        retry_on_condition(operation, lambda result: not result, 0, 1, sleep=_recording_sleep(waits))
    )

    assert result == []
    assert operation.calls == 1
    assert waits == []


def test_default_delay_is_two_seconds():
    operation = FlakyOperation([[], ["row"]])
    waits: list[float] = []

    asyncio.run(retry_on_condition(operation, lambda result: not result, sleep=_recording_sleep(waits)))

    assert waits == [2.0]
