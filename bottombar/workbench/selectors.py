"""CSS selectors for the VS Code web workbench, grouped by part.

Panel-scoped entries are resolved relative to the panel part; everything
else is page-wide.
"""

PANEL_ROOT = '[id="workbench.parts.panel"]'

SELECTORS = {
    "workbench": {
        "root": ".monaco-workbench",
        "editor_tab_label": ".tabs-container .tab .label-name",
        "editor_lines": '[id="workbench.parts.editor"] .monaco-editor .view-lines',
    },
    "quick_input": {
        "input": ".quick-input-widget .quick-input-box input",
        "rows": ".quick-input-widget .quick-input-list .monaco-list-row",
    },
    "panel": {
        "root": PANEL_ROOT,
        "tab": PANEL_ROOT + ' .composite-bar [aria-label^="{title}"]',
        "badge": PANEL_ROOT + ' .composite-bar .action-item:has([aria-label^="{title}"]) .badge-content',
    },
    "problems": {
        "root": '[id="workbench.panel.markers"]',
        "row": ".monaco-list-row",
        "twistie": ".monaco-tl-twistie",
        "filter_input": PANEL_ROOT + " .viewpane-filter input",
    },
    "output": {
        "root": '[id="workbench.panel.output"]',
        "channel_select": PANEL_ROOT + " select.monaco-select-box",
        "clear": PANEL_ROOT + " .title-actions .codicon-clear-all",
        "editor": ".monaco-editor",
        "line": ".view-lines .view-line",
    },
    "terminal": {
        "root": '[id="workbench.panel.terminal"]',
        "xterm": ".xterm",
        "input": ".xterm-helper-textarea",
    },
}

PANEL_TITLES = {
    "problems": "Problems",
    "output": "Output",
    "terminal": "Terminal",
}
