"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from vuescaffold.cli._prompts import (
    prompt_e2e,
    prompt_features,
    prompt_overwrite,
    prompt_package_name,
    prompt_project_name,
)
from vuescaffold.core.types import E2EFramework


class TestPromptProjectName:
    @patch("builtins.input", return_value="")
    def test_default(self, mock_input: MagicMock) -> None:
        assert prompt_project_name("vue-project") == "vue-project"
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="  my-app ")
    def test_typed(self, mock_input: MagicMock) -> None:
        assert prompt_project_name("vue-project") == "my-app"


class TestPromptOverwrite:
    @patch("builtins.input", return_value="")
    def test_default_yes(self, mock_input: MagicMock) -> None:
        assert prompt_overwrite("app") is True

    @patch("builtins.input", return_value="n")
    def test_explicit_no(self, mock_input: MagicMock) -> None:
        assert prompt_overwrite(".") is False


class TestPromptPackageName:
    @patch("vuescaffold.cli._prompts._settle")
    @patch("builtins.input", side_effect=["Not Valid", "valid-name"])
    def test_hint_line_is_cleared(self, mock_input: MagicMock, mock_settle: MagicMock) -> None:
        prompt_package_name("my-app")

        # question + bar + input, plus the hint line on the second attempt
        assert [c.args[0] for c in mock_settle.call_args_list] == [3, 4]

    @patch("builtins.input", return_value="")
    def test_accepts_valid_initial(self, mock_input: MagicMock) -> None:
        assert prompt_package_name("my-app") == "my-app"
        mock_input.assert_called_once()

    @patch("builtins.input", side_effect=["Not Valid", "valid-name"])
    def test_reprompts_until_valid(self, mock_input: MagicMock) -> None:
        assert prompt_package_name("my-app") == "valid-name"
        assert mock_input.call_count == 2


class TestPromptE2E:
    @patch("vuescaffold.cli._prompts.TerminalMenu")
    def test_returns_selected(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 3

        assert prompt_e2e() is E2EFramework.PLAYWRIGHT

    @patch("vuescaffold.cli._prompts._settle")
    @patch("vuescaffold.cli._prompts.TerminalMenu")
    def test_answer_shows_only_chosen_label(
        self, mock_menu_cls: MagicMock, mock_settle: MagicMock
    ) -> None:
        mock_menu_cls.return_value.show.return_value = 2

        prompt_e2e()

        lines, question, display = mock_settle.call_args.args
        assert lines == 2
        assert question == "Add an End-to-End Testing Solution?"
        assert display.startswith("Nightwatch")
        assert "Cypress" not in display

    @patch("vuescaffold.cli._prompts.TerminalMenu")
    def test_exit_on_none(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(SystemExit):
            prompt_e2e()


class TestPromptFeatures:
    @patch("vuescaffold.cli._prompts.TerminalMenu")
    @patch("builtins.input", return_value="")
    def test_all_defaults(self, mock_input: MagicMock, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        flags = prompt_features()

        assert not flags.typescript
        assert not flags.router
        assert flags.e2e is E2EFramework.NONE
        assert flags.eslint
        assert not flags.prettier

    @patch("vuescaffold.cli._prompts.TerminalMenu")
    @patch("builtins.input", return_value="y")
    def test_all_yes(self, mock_input: MagicMock, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        flags = prompt_features()

        assert flags.typescript and flags.jsx and flags.router and flags.pinia
        assert flags.vitest and flags.eslint and flags.prettier and flags.devtools
        assert flags.e2e is E2EFramework.CYPRESS
        # typescript, jsx, router, pinia, vitest, eslint, prettier, devtools
        assert mock_input.call_count == 8

    @patch("vuescaffold.cli._prompts.TerminalMenu")
    @patch("builtins.input", return_value="n")
    def test_prettier_skipped_without_eslint(
        self, mock_input: MagicMock, mock_menu_cls: MagicMock
    ) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        flags = prompt_features()

        assert not flags.eslint
        assert not flags.prettier
        assert mock_input.call_count == 7
