"""Problems view: diagnostic markers, the filter box and the count badge."""

import logging
from enum import Enum

from playwright.sync_api import Locator

from .panel import PanelView
from .selectors import PANEL_TITLES, SELECTORS

logger = logging.getLogger(__name__)


class MarkerType(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    FILE = "file"
    ANY = "any"


def marker_type_from_row(aria_label: str | None, aria_expanded: str | None) -> MarkerType:
    """Classify a markers-tree row from its accessibility attributes.

    Diagnostic rows are labelled "Error: ..." or "Warning: ...". File rows
    carry an expand state. Info and hint rows fall through to ANY.
    """
    label = (aria_label or "").lstrip()
    if label.startswith("Error"):
        return MarkerType.ERROR
    if label.startswith("Warning"):
        return MarkerType.WARNING
    if aria_expanded is not None:
        return MarkerType.FILE
    return MarkerType.ANY


class Marker:
    """One row of the Problems view."""

    def __init__(self, view: "ProblemsView", row: Locator):
        self.view = view
        self.row = row

    def get_text(self) -> str:
        self.view.ensure_valid()
        return self.row.get_attribute("aria-label") or ""

    def get_type(self) -> MarkerType:
        self.view.ensure_valid()
        return marker_type_from_row(
            self.row.get_attribute("aria-label"),
            self.row.get_attribute("aria-expanded"),
        )

    def is_expanded(self) -> bool:
        self.view.ensure_valid()
        return self.row.get_attribute("aria-expanded") == "true"

    def toggle_expand(self, expand: bool) -> None:
        """Expand or collapse a file marker; no-op if already in that state."""
        if self.get_type() != MarkerType.FILE:
            raise TypeError("Only file markers can be expanded or collapsed")
        if self.is_expanded() == expand:
            return
        self.row.locator(SELECTORS["problems"]["twistie"]).click()
        self.view.workbench.wait_until(
            lambda: self.is_expanded() == expand,
            message=f"file marker {'expanded' if expand else 'collapsed'}",
        )

    def __repr__(self):
        return f"<Marker row={self.row!r}>"


class ProblemsView(PanelView):
    title = PANEL_TITLES["problems"]
    root_selector = SELECTORS["problems"]["root"]

    def get_all_visible_markers(self, kind: MarkerType = MarkerType.ANY) -> list[Marker]:
        """Markers currently rendered in the tree.

        The tree is virtualised, so rows scrolled out of view are not
        returned. Use the count badge for totals.
        """
        rows = self.root().locator(SELECTORS["problems"]["row"]).all()
        markers = [Marker(self, row) for row in rows]
        if kind == MarkerType.ANY:
            return markers
        return [m for m in markers if m.get_type() == kind]

    def _filter_input(self) -> Locator:
        self.ensure_valid()
        return self.page.locator(SELECTORS["problems"]["filter_input"]).first

    def get_filter(self) -> str:
        return self._filter_input().input_value()

    def set_filter(self, text: str) -> None:
        """Replace the filter text and wait for the box to hold it.

        The tree re-filters after a debounce; callers should wait on the
        markers they expect rather than assume it has applied.
        """
        logger.debug("Setting problems filter to %r", text)
        box = self._filter_input()
        box.fill(text)
        self.workbench.wait_until(lambda: self.get_filter() == text, message=f"filter text {text!r}")

    def clear_filter(self) -> None:
        self.set_filter("")

    def get_count_badge(self) -> Locator:
        self.ensure_valid()
        return self.panel.badge(self.title)
