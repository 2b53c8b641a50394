"""
Condition polling for UI assertions.

The workbench renders asynchronously, so tests wait on an observable
predicate instead of asserting right away:

    wait_until(lambda: len(view.get_all_visible_markers(MarkerType.ANY)) > 0, 15000)

Fixed sleeps remain available for spots with no observable signal, and
scenario_timeout() puts a hard deadline around a whole scenario.

The scenario deadline is cooperative: nothing is interrupted from outside.
wait_until() and sleep() never run past it, and code that hands its own
timeouts to the browser driver asks scenario_bound() for the time left.
"""

import logging
import time
from collections.abc import Callable
from contextlib import ContextDecorator
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, TypeVar

from .config import DEFAULT_SCENARIO_TIMEOUT_MS

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_POLL_INTERVAL_MS = 100


class ConditionTimeout(TimeoutError):
    """Raised when a polled condition never became truthy within its bound."""

    def __init__(self, message: str, timeout_ms: float, elapsed_ms: float, last_value: Any = None):
        self.message = message
        self.timeout_ms = timeout_ms
        self.elapsed_ms = elapsed_ms
        self.last_value = last_value
        super().__init__(
            f"{message}: condition not met after {elapsed_ms:.0f}ms "
            f"(timeout {timeout_ms:.0f}ms, last value {last_value!r})"
        )


class ScenarioTimeout(TimeoutError):
    """Raised inside a scenario that ran past its deadline."""

    def __init__(self, timeout_ms: float):
        self.timeout_ms = timeout_ms
        super().__init__(f"Scenario exceeded its {timeout_ms:.0f}ms deadline")


@dataclass(frozen=True)
class _Scenario:
    timeout_ms: float
    deadline: float  # time.monotonic() value

    def left(self) -> float:
        return self.deadline - time.monotonic()


# Deadline of the scenario running in this thread or task
_current_scenario: ContextVar[_Scenario | None] = ContextVar("current_scenario", default=None)


def remaining_ms() -> float | None:
    """Milliseconds left before the current scenario's deadline, or None outside a scenario."""
    scenario = _current_scenario.get()
    if scenario is None:
        return None
    return scenario.left() * 1000


def scenario_bound(timeout_ms: float) -> float:
    """
    Cap ``timeout_ms`` to what the current scenario has left.

    Raises:
        ScenarioTimeout: The scenario deadline has already passed.
    """
    scenario = _current_scenario.get()
    if scenario is None:
        return timeout_ms
    left_ms = scenario.left() * 1000
    if left_ms <= 0:
        raise ScenarioTimeout(scenario.timeout_ms)
    return min(timeout_ms, left_ms)


def _describe(predicate: Callable, message: str | None) -> str:
    return message or getattr(predicate, "__name__", repr(predicate))


def _check_bounds(timeout_ms: float, interval_ms: float) -> None:
    if timeout_ms <= 0:
        raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be positive, got {interval_ms}")


def wait_until(
    predicate: Callable[[], T],
    timeout_ms: float,
    interval_ms: float = DEFAULT_POLL_INTERVAL_MS,
    message: str | None = None,
) -> T:
    """
    Poll ``predicate`` until it returns something truthy.

    The predicate is called at least once. Between calls the poller sleeps
    ``interval_ms``, never past the deadline. Inside scenario_timeout() the
    deadline is also capped by the scenario's.

    Returns:
        The first truthy value returned by the predicate.

    Raises:
        ConditionTimeout: No truthy value before ``timeout_ms`` elapsed.
        ScenarioTimeout: The scenario deadline came first.
        Exception: Anything the predicate raises, unchanged.
    """
    _check_bounds(timeout_ms, interval_ms)
    description = _describe(predicate, message)
    scenario = _current_scenario.get()
    if scenario is not None and scenario.left() <= 0:
        raise ScenarioTimeout(scenario.timeout_ms)

    start = time.monotonic()
    deadline = start + timeout_ms / 1000
    cut_by_scenario = scenario is not None and scenario.deadline < deadline
    if cut_by_scenario:
        deadline = scenario.deadline
    attempts = 0

    while True:
        attempts += 1
        value = predicate()
        if value:
            logger.debug("%s satisfied after %d attempt(s)", description, attempts)
            return value

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            elapsed_ms = (time.monotonic() - start) * 1000
            logger.warning(
                f"Gave up waiting for {description} after {attempts} attempt(s), "
                f"{elapsed_ms:.0f}ms"
            )
            if cut_by_scenario:
                raise ScenarioTimeout(scenario.timeout_ms)
            raise ConditionTimeout(description, timeout_ms, elapsed_ms, value)

        time.sleep(min(interval_ms / 1000, remaining))


def sleep(duration_ms: float, reason: str | None = None) -> None:
    """
    Suspend for a fixed time.

    Only for spots where the UI exposes nothing to poll on; every call is
    a potential source of flakiness, so prefer wait_until(). A delay that
    would outlast the scenario deadline sleeps up to it and raises
    ScenarioTimeout.
    """
    if duration_ms < 0:
        raise ValueError(f"duration_ms must not be negative, got {duration_ms}")
    logger.debug("Fixed delay of %dms%s", duration_ms, f" ({reason})" if reason else "")
    scenario = _current_scenario.get()
    if scenario is not None:
        left = scenario.left()
        if duration_ms / 1000 > left:
            time.sleep(max(left, 0))
            raise ScenarioTimeout(scenario.timeout_ms)
    time.sleep(duration_ms / 1000)


class scenario_timeout(ContextDecorator):
    """
    Hard deadline around a scenario, as a context manager or decorator.

    Must be entered before the scenario first suspends. Waits and sleeps
    inside the scope stop at the deadline with ScenarioTimeout. A body that
    finishes or fails some other way after the deadline is reported as a
    ScenarioTimeout chained to the original error. An inner scope sets its
    own deadline; the outer one applies again once it exits.

    Usage:
        with scenario_timeout(30_000):
            view = panel.open_problems_view()

        @scenario_timeout(5_000)
        def test_something(): ...
    """

    def __init__(self, timeout_ms: float = DEFAULT_SCENARIO_TIMEOUT_MS):
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
        self.timeout_ms = timeout_ms
        self._tokens = []

    def __enter__(self):
        scenario = _Scenario(self.timeout_ms, time.monotonic() + self.timeout_ms / 1000)
        self._tokens.append(_current_scenario.set(scenario))
        return self

    def __exit__(self, exc_type, exc, tb):
        scenario = _current_scenario.get()
        _current_scenario.reset(self._tokens.pop())
        if exc_type is not None and issubclass(exc_type, ScenarioTimeout):
            return False
        if scenario.left() <= 0:
            logger.warning(
                "Scenario overran its %dms deadline%s",
                self.timeout_ms,
                f" ({exc_type.__name__})" if exc_type else "",
            )
            raise ScenarioTimeout(self.timeout_ms) from exc
        return False
