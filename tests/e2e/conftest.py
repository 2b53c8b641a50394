"""Pytest fixtures for the bottom-panel browser suite.

The suite runs against a live VS Code web workbench (``code serve-web``,
openvscode-server or code-server) opened on tests/e2e/resources.

ARCHITECTURE: one browser, one page and one BottomBarPanel for the whole
run. Fixture scopes carry the nesting: the panel is opened for the module
and closed at the end, each view group opens its view in a class-scoped
fixture, and tests run strictly in declaration order against that shared
state.
"""

import pytest
from playwright.sync_api import sync_playwright

from bottombar.config import load_config
from bottombar.polling import scenario_timeout
from bottombar.workbench import BottomBarPanel, Workbench


# ---------------------------------------------------------------------------
# Override parent autouse fixture — the runner passes BOTTOMBAR_* through
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_bottombar_env():
    """No-op override: browser tests honour the runner's environment."""
    yield


# ---------------------------------------------------------------------------
# Scenario deadlines
# ---------------------------------------------------------------------------


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item):
    """Run every browser test under a deadline, raised per test with
    ``@pytest.mark.scenario_timeout(ms)``.

    Playwright's default timeout follows the deadline while the test runs.
    """
    marker = item.get_closest_marker("scenario_timeout")
    timeout_ms = marker.args[0] if marker else load_config().default_scenario_ms
    wb = item.funcargs.get("workbench")
    try:
        with scenario_timeout(timeout_ms):
            if wb is not None:
                wb.sync_default_timeout()
            return (yield)
    finally:
        if wb is not None:
            wb.sync_default_timeout()


# ---------------------------------------------------------------------------
# Session-scoped: config, browser, workbench
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def workbench_config():
    return load_config()


@pytest.fixture(scope="session")
def browser(workbench_config):
    """Launch Chromium for the entire test session."""
    with sync_playwright() as p:
        b = p.chromium.launch(headless=workbench_config.headless)
        yield b
        b.close()


@pytest.fixture(scope="session")
def workbench(browser, workbench_config):
    """Workbench loaded once; the clipboard is how view text is read back."""
    ctx = browser.new_context(
        viewport={"width": workbench_config.viewport_width, "height": workbench_config.viewport_height},
        permissions=["clipboard-read", "clipboard-write"],
    )
    pg = ctx.new_page()
    wb = Workbench(pg, workbench_config)
    with scenario_timeout(workbench_config.group_setup_ms):
        wb.load()
    wb.sync_default_timeout()
    yield wb
    pg.close()
    ctx.close()


# ---------------------------------------------------------------------------
# Module-scoped: the panel stays open for the suite, closed afterwards
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def panel(workbench):
    bottom_bar = BottomBarPanel(workbench)
    bottom_bar.toggle(True)
    yield bottom_bar
    bottom_bar.toggle(False)
