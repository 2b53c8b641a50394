"""The bottom panel and the base class for the views it hosts."""

import logging

from playwright.sync_api import Locator

from .. import polling
from .base import StaleViewHandle, Workbench
from .selectors import SELECTORS

logger = logging.getLogger(__name__)

TOGGLE_PANEL_COMMAND = "View: Toggle Panel Visibility"


class BottomBarPanel:
    """
    The panel docked at the bottom of the workbench.

    View handles returned by the open_* methods stay usable only while the
    panel is open and their view is the selected one. Closing the panel
    bumps ``generation``, which retires every handle issued before.
    """

    def __init__(self, workbench: Workbench):
        self.workbench = workbench
        self.generation = 0
        self.active_view: str | None = None

    @property
    def page(self):
        return self.workbench.page

    def _element(self) -> Locator:
        return self.page.locator(SELECTORS["panel"]["root"])

    def is_displayed(self) -> bool:
        return self._element().is_visible()

    def toggle(self, open: bool = True) -> None:
        """Show or hide the panel, waiting until it is in that state."""
        if self.is_displayed() != open:
            logger.debug("%s panel", "Opening" if open else "Closing")
            self.workbench.execute_command(TOGGLE_PANEL_COMMAND)
            self.workbench.wait_until(
                lambda: self.is_displayed() == open,
                message=f"panel {'open' if open else 'closed'}",
            )
        if not open:
            self.generation += 1
            self.active_view = None

    def tab(self, title: str) -> Locator:
        return self.page.locator(SELECTORS["panel"]["tab"].format(title=title)).first

    def badge(self, title: str) -> Locator:
        return self.page.locator(SELECTORS["panel"]["badge"].format(title=title)).first

    def _open_view(self, view_cls):
        self.toggle(True)
        self.tab(view_cls.title).click()
        self.page.locator(view_cls.root_selector).wait_for(
            state="visible", timeout=polling.scenario_bound(self.workbench.config.default_wait_ms)
        )
        self.active_view = view_cls.title
        logger.info("Opened %s view", view_cls.title)
        return view_cls(self, self.generation)

    def open_problems_view(self):
        from .problems import ProblemsView

        return self._open_view(ProblemsView)

    def open_output_view(self):
        from .output import OutputView

        return self._open_view(OutputView)

    def open_terminal_view(self):
        from .terminal import TerminalView

        return self._open_view(TerminalView)


class PanelView:
    """A view borrowed from the panel for as long as it stays selected."""

    title = ""
    root_selector = ""

    def __init__(self, panel: BottomBarPanel, generation: int):
        self.panel = panel
        self._generation = generation

    @property
    def workbench(self) -> Workbench:
        return self.panel.workbench

    @property
    def page(self):
        return self.panel.page

    def ensure_valid(self) -> None:
        if self.panel.generation != self._generation:
            raise StaleViewHandle(self.title, "panel was closed since this handle was issued")
        if self.panel.active_view != self.title:
            raise StaleViewHandle(self.title, f"{self.panel.active_view or 'no'} view is selected")
        if not self.panel.is_displayed():
            raise StaleViewHandle(self.title, "panel is not displayed")

    def root(self) -> Locator:
        self.ensure_valid()
        return self.page.locator(self.root_selector)
