"""
Page objects for the VS Code web workbench.

Thin wrappers over a Playwright sync Page; they query and drive the UI
but own none of its behavior.
"""

from .base import StaleViewHandle, Workbench, WorkbenchError
from .editor import EditorView
from .output import OutputView
from .panel import BottomBarPanel, PanelView
from .problems import Marker, MarkerType, ProblemsView, marker_type_from_row
from .selectors import SELECTORS
from .terminal import TerminalView

__all__ = [
    "Workbench",
    "WorkbenchError",
    "StaleViewHandle",
    "BottomBarPanel",
    "PanelView",
    "ProblemsView",
    "Marker",
    "MarkerType",
    "marker_type_from_row",
    "OutputView",
    "TerminalView",
    "EditorView",
    "SELECTORS",
]
