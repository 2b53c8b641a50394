"""Tests for the Terminal view page object."""

from unittest.mock import MagicMock, call

import pytest

from bottombar.workbench.terminal import COPY_SELECTION_COMMAND, SELECT_ALL_COMMAND

TERMINAL_TEXT = 'user@host:~$ echo "hello world"\r\nhello world\r\nuser@host:~$ '


@pytest.fixture
def view(panel, page):
    def run_command(title):
        if title == COPY_SELECTION_COMMAND:
            page.clipboard = TERMINAL_TEXT

    panel.workbench.execute_command.side_effect = run_command
    return panel.open_terminal_view()


class TestExecuteCommand:
    def test_types_and_submits(self, view, page):
        view.workbench.sleep = MagicMock()
        view.execute_command('echo "hello world"')
        page.keyboard.type.assert_called_once_with('echo "hello world"')
        page.keyboard.press.assert_called_once_with("Enter")
        view.workbench.sleep.assert_not_called()

    def test_settle_delay(self, view):
        view.workbench.sleep = MagicMock()
        view.execute_command("ls", settle_ms=2000)
        view.workbench.sleep.assert_called_once_with(2000, reason="terminal command settle")


class TestText:
    def test_select_all_then_copy(self, view):
        view.get_text()
        commands = view.workbench.execute_command.call_args_list
        assert commands[-2:] == [call(SELECT_ALL_COMMAND), call(COPY_SELECTION_COMMAND)]

    def test_exact_line_found(self, view):
        assert view.has_line("hello world")

    def test_command_echo_is_not_a_match(self, view):
        assert not view.has_line("echo")
