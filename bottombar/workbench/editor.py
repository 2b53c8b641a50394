"""Editor area."""

import logging

from .base import Workbench

logger = logging.getLogger(__name__)

CLOSE_ALL_COMMAND = "View: Close All Editors"


class EditorView:
    def __init__(self, workbench: Workbench):
        self.workbench = workbench

    def get_open_editor_titles(self) -> list[str]:
        return self.workbench.get_open_editor_titles()

    def close_all_editors(self) -> None:
        if not self.get_open_editor_titles():
            return
        self.workbench.execute_command(CLOSE_ALL_COMMAND)
        self.workbench.wait_until(lambda: not self.get_open_editor_titles(), message="all editors closed")
        logger.debug("Closed all editors")
