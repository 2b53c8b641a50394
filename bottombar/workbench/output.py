"""Output view: channel selection and channel text."""

import logging

from playwright.sync_api import Locator

from ..text import normalize_line_endings
from .panel import PanelView
from .selectors import PANEL_TITLES, SELECTORS

logger = logging.getLogger(__name__)


class OutputView(PanelView):
    title = PANEL_TITLES["output"]
    root_selector = SELECTORS["output"]["root"]

    def _channel_select(self) -> Locator:
        self.ensure_valid()
        return self.page.locator(SELECTORS["output"]["channel_select"]).first

    def get_channel_names(self) -> list[str]:
        names = self._channel_select().locator("option").all_text_contents()
        return [n.strip() for n in names if n.strip()]

    def get_current_channel(self) -> str:
        return self._channel_select().evaluate("s => s.options[s.selectedIndex]?.text ?? ''").strip()

    def select_channel(self, name: str) -> None:
        names = self.get_channel_names()
        if name not in names:
            raise ValueError(f"Unknown output channel {name!r}; available: {', '.join(names)}")
        self._channel_select().select_option(label=name)
        self.workbench.wait_until(lambda: self.get_current_channel() == name, message=f"output channel {name!r}")
        logger.info("Selected output channel %s", name)

    def _editor(self) -> Locator:
        return self.root().locator(SELECTORS["output"]["editor"]).first

    def get_text(self) -> str:
        """Full channel text, read back through select-all and copy."""
        self._editor().click()
        self.page.keyboard.press("ControlOrMeta+A")
        return normalize_line_endings(self.workbench.copy_selection())

    def _rendered_lines(self) -> list[str]:
        return self._editor().locator(SELECTORS["output"]["line"]).all_text_contents()

    def clear_text(self) -> None:
        """Clear the channel; the editor is left holding one empty line."""
        self.ensure_valid()
        self.page.locator(SELECTORS["output"]["clear"]).first.click()
        self.workbench.wait_until(
            lambda: [line.strip() for line in self._rendered_lines()] == [""],
            message="output channel cleared",
        )
