"""Terminal view."""

import logging

from ..text import contains_line, normalize_line_endings
from .panel import PanelView
from .selectors import PANEL_TITLES, SELECTORS

logger = logging.getLogger(__name__)

SELECT_ALL_COMMAND = "Terminal: Select All"
COPY_SELECTION_COMMAND = "Terminal: Copy Selection"


class TerminalView(PanelView):
    title = PANEL_TITLES["terminal"]
    root_selector = SELECTORS["terminal"]["root"]

    def _focus(self) -> None:
        self.root().locator(SELECTORS["terminal"]["xterm"]).first.click()

    def execute_command(self, command: str, settle_ms: float = 0) -> None:
        """Type ``command`` into the active terminal and press Enter.

        A shell gives no signal when a command has finished, so the caller
        picks a settle delay.
        """
        self._focus()
        logger.info("Terminal: %s", command)
        self.page.keyboard.type(command)
        self.page.keyboard.press("Enter")
        if settle_ms:
            self.workbench.sleep(settle_ms, reason="terminal command settle")

    def get_text(self) -> str:
        self._focus()
        self.workbench.write_clipboard("")
        self.workbench.execute_command(SELECT_ALL_COMMAND)
        self.workbench.execute_command(COPY_SELECTION_COMMAND)
        text = self.workbench.wait_until(self.workbench.read_clipboard, message="terminal text on clipboard")
        return normalize_line_endings(text)

    def has_line(self, expected: str) -> bool:
        return contains_line(self.get_text(), expected)
