"""
UI test harness for the workbench bottom panel.

Provides:
- Condition polling and scenario deadlines for asynchronous UI state
- Page objects for the panel and its Problems, Output and Terminal views
- Platform line-ending helpers for comparing rendered text
"""

from .config import DEFAULT_SCENARIO_TIMEOUT_MS, ConfigError, WorkbenchConfig, load_config
from .polling import (
    ConditionTimeout,
    ScenarioTimeout,
    remaining_ms,
    scenario_bound,
    scenario_timeout,
    sleep,
    wait_until,
)
from .text import contains_line, line_terminator, normalize_line_endings, split_lines

__all__ = [
    "wait_until",
    "sleep",
    "scenario_timeout",
    "scenario_bound",
    "remaining_ms",
    "ConditionTimeout",
    "ScenarioTimeout",
    "WorkbenchConfig",
    "ConfigError",
    "load_config",
    "DEFAULT_SCENARIO_TIMEOUT_MS",
    "line_terminator",
    "normalize_line_endings",
    "split_lines",
    "contains_line",
]
