"""Workbench-wide page object: command palette, quick open, clipboard."""

import logging
from collections.abc import Callable
from pathlib import PurePosixPath

from playwright.sync_api import Page

from .. import polling
from ..config import WorkbenchConfig
from .selectors import SELECTORS

logger = logging.getLogger(__name__)

# Playwright's own default for actions and waits
PLAYWRIGHT_DEFAULT_TIMEOUT_MS = 30000


class WorkbenchError(RuntimeError):
    """Raised when the workbench does not reach an expected state."""


class StaleViewHandle(RuntimeError):
    """Raised when a view handle outlived its panel session or selection."""

    def __init__(self, view: str, reason: str):
        self.view = view
        self.reason = reason
        super().__init__(f"{view} view handle is stale: {reason}")


class Workbench:
    """Entry point for a workbench loaded in a Playwright page."""

    def __init__(self, page: Page, config: WorkbenchConfig | None = None):
        self.page = page
        self.config = config or WorkbenchConfig()

    def wait_until(self, predicate, timeout_ms: float | None = None, message: str | None = None):
        if timeout_ms is None:
            timeout_ms = self.config.default_wait_ms
        self.sync_default_timeout()
        return polling.wait_until(
            predicate,
            timeout_ms,
            interval_ms=self.config.poll_interval_ms,
            message=message,
        )

    def sleep(self, duration_ms: float, reason: str | None = None) -> None:
        polling.sleep(duration_ms, reason=reason)

    def sync_default_timeout(self) -> None:
        """
        Keep Playwright's default timeout inside the current scenario deadline.

        Outside a scenario the stock default applies again.
        """
        left = polling.remaining_ms()
        timeout = PLAYWRIGHT_DEFAULT_TIMEOUT_MS if left is None else max(left, 1)
        self.page.context.set_default_timeout(timeout)

    def load(self, timeout_ms: float = 30000) -> None:
        """Navigate to the workbench and wait for the shell to render."""
        url = self.config.workbench_url
        logger.info("Loading workbench at %s", url)
        self.sync_default_timeout()
        self.page.goto(url, wait_until="domcontentloaded")
        self.page.wait_for_selector(SELECTORS["workbench"]["root"], timeout=polling.scenario_bound(timeout_ms))

    # ------------------------------------------------------------------
    # Quick input
    # ------------------------------------------------------------------

    def _quick_input_rows(self) -> int:
        return self.page.locator(SELECTORS["quick_input"]["rows"]).count()

    def _run_quick_input(self, opener: str, query: str) -> None:
        self.page.keyboard.press(opener)
        box = self.page.locator(SELECTORS["quick_input"]["input"])
        box.wait_for(state="visible", timeout=polling.scenario_bound(self.config.default_wait_ms))
        box.fill(query)
        self.wait_until(lambda: self._quick_input_rows() > 0, message=f"quick input results for {query!r}")
        box.press("Enter")

    def execute_command(self, title: str) -> None:
        """Run a command through the command palette by its visible title."""
        logger.debug("Executing command %r", title)
        self._run_quick_input("F1", f">{title}")

    def get_open_editor_titles(self) -> list[str]:
        return self.page.locator(SELECTORS["workbench"]["editor_tab_label"]).all_text_contents()

    def open_resources(self, *paths: str, callback: Callable[[], object] | None = None) -> None:
        """
        Open workspace-relative files through quick open.

        Waits for each file's editor tab, then runs ``callback`` so the
        caller can wait on whatever the host does after opening.
        """
        for path in paths:
            name = PurePosixPath(path.replace("\\", "/")).name
            logger.info("Opening %s", path)
            try:
                self._run_quick_input("ControlOrMeta+P", path)
            except polling.ConditionTimeout as exc:
                raise WorkbenchError(f"Quick open found no match for {path!r}") from exc
            self.wait_until(
                lambda: name in self.get_open_editor_titles(),
                message=f"editor tab for {name}",
            )
        if callback is not None:
            callback()

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def write_clipboard(self, text: str) -> None:
        self.page.evaluate("text => navigator.clipboard.writeText(text)", text)

    def read_clipboard(self) -> str:
        return self.page.evaluate("() => navigator.clipboard.readText()")

    def copy_selection(self) -> str:
        """Copy the focused selection and return it once it lands on the clipboard."""
        self.write_clipboard("")
        self.page.keyboard.press("ControlOrMeta+C")
        return self.wait_until(self.read_clipboard, message="clipboard contents")
