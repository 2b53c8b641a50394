"""Fake Playwright page for page-object unit tests.

Every selector gets its own MagicMock locator, created on first use and
handed back on every later lookup, so tests can script one element and
assert on calls made to it.
"""

from unittest.mock import MagicMock

import pytest

from bottombar.config import WorkbenchConfig
from bottombar.workbench import BottomBarPanel, Workbench
from bottombar.workbench.selectors import SELECTORS


class FakePage:
    def __init__(self):
        self.locators = {}
        self.keyboard = MagicMock(name="keyboard")
        self.context = MagicMock(name="context")
        self.clipboard = ""
        self.evaluate = MagicMock(side_effect=self._evaluate)

    def locator(self, selector):
        if selector not in self.locators:
            loc = MagicMock(name=selector)
            loc.first = loc
            self.locators[selector] = loc
        return self.locators[selector]

    def _evaluate(self, script, arg=None):
        if "writeText" in script:
            self.clipboard = arg
            return None
        if "readText" in script:
            return self.clipboard
        raise AssertionError(f"unexpected evaluate: {script}")


@pytest.fixture
def page():
    return FakePage()


@pytest.fixture
def config():
    return WorkbenchConfig(default_wait_ms=200, poll_interval_ms=10)


@pytest.fixture
def workbench(page, config):
    return Workbench(page, config)


@pytest.fixture
def panel_state(page):
    """Panel visibility driven by a flag instead of the DOM."""
    state = {"open": True}
    page.locator(SELECTORS["panel"]["root"]).is_visible.side_effect = lambda: state["open"]
    return state


@pytest.fixture
def panel(workbench, panel_state, monkeypatch):
    def toggle_command(title):
        panel_state["open"] = not panel_state["open"]

    monkeypatch.setattr(workbench, "execute_command", MagicMock(side_effect=toggle_command))
    return BottomBarPanel(workbench)
