"""Tests for the in-timer configuration menu."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from tomate_cli.models.timer_state import TimerStateMachine
from tomate_cli.services.config_service import ConfigService
from tomate_cli.ui.config_menu import ConfigMenu, build_menu_panel


@pytest.fixture()
def service(config_path) -> ConfigService:
    return ConfigService(config_path)


@pytest.fixture()
def machine(service) -> TimerStateMachine:
    return TimerStateMachine(service.load_config, lambda session: None)


@pytest.fixture()
def console() -> Console:
    return Console(file=io.StringIO(), width=100, record=True)


@pytest.fixture()
def menu(machine, service, console) -> ConfigMenu:
    return ConfigMenu(machine, service, console)


def _answers(mocker, *answers):
    return mocker.patch("tomate_cli.ui.config_menu.Prompt.ask", side_effect=list(answers))


class TestShow:
    def test_sets_pomodoro_and_seconds_left(self, mocker, menu, machine, service):
        _answers(mocker, "1", "1800")

        menu.show()

        state = machine.get_state()
        assert service.load_config().pomodoro == 1800
        assert state.config.pomodoro == 1800
        assert state.seconds_left == 1800

    def test_break_change_keeps_running_pomodoro(self, mocker, menu, machine, service):
        machine.update_state(seconds_left=42)
        _answers(mocker, "2", "120")

        menu.show()

        state = machine.get_state()
        assert service.load_config().short_break == 120
        assert state.config.short_break == 120
        assert state.seconds_left == 42

    def test_change_to_current_break_resets_its_countdown(self, mocker, menu, machine):
        machine.update_state(current_mode="longBreak", seconds_left=5)
        _answers(mocker, "3", "600")

        menu.show()

        assert machine.get_state().seconds_left == 600

    def test_invalid_duration_is_rejected(self, mocker, menu, machine, service, console, config_path):
        _answers(mocker, "1", "abc")

        menu.show()

        assert not config_path.exists()
        assert machine.get_state().config.pomodoro == 1500
        assert "Invalid duration" in console.export_text()

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_non_positive_duration_is_rejected(self, mocker, menu, config_path, value):
        _answers(mocker, "1", value)

        menu.show()

        assert not config_path.exists()

    def test_quit_changes_nothing(self, mocker, menu, machine, config_path):
        prompt = _answers(mocker, "q")

        menu.show()

        prompt.assert_called_once()
        assert not config_path.exists()

    def test_unknown_option(self, mocker, menu, console):
        _answers(mocker, "9")

        menu.show()

        assert "Invalid option" in console.export_text()

    @pytest.mark.parametrize("was_paused", [True, False])
    def test_restores_pause_flag(self, mocker, menu, machine, was_paused):
        machine.update_state(is_paused=was_paused)
        _answers(mocker, "q")

        menu.show()

        state = machine.get_state()
        assert state.is_paused is was_paused
        assert state.in_config_menu is False

    def test_pauses_while_open(self, mocker, menu, machine):
        seen = []

        def ask(*args, **kwargs):
            state = machine.get_state()
            seen.append((state.is_paused, state.in_config_menu))
            return "q"

        mocker.patch("tomate_cli.ui.config_menu.Prompt.ask", side_effect=ask)

        menu.show()

        assert seen == [(True, True)]

    def test_flags_restored_when_prompt_aborts(self, mocker, menu, machine):
        mocker.patch("tomate_cli.ui.config_menu.Prompt.ask", side_effect=EOFError)

        with pytest.raises(EOFError):
            menu.show()

        assert machine.get_state().in_config_menu is False
        assert machine.get_state().is_paused is False


def test_menu_panel_lists_current_values(timer_config):
    console = Console(file=io.StringIO(), width=80, record=True)
    console.print(build_menu_panel(timer_config))
    text = console.export_text()

    assert "00:25:00" in text
    assert "00:05:00" in text
    assert "00:15:00" in text
    assert "[q] Back to Timer" in text
