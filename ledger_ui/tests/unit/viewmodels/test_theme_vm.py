from __future__ import annotations

from ledger_ui.adapters.theme_storage import THEME_KEY, MappingThemeStorage
from ledger_ui.viewmodels.theme_vm import ThemeMode, ThemeVM


def test_defaults_to_light_without_stored_preference() -> None:
    backing: dict = {}
    applied = []
    vm = ThemeVM(MappingThemeStorage(backing), on_apply=applied.append)

    assert vm.load() is ThemeMode.LIGHT
    assert applied == [ThemeMode.LIGHT]
    assert backing == {}


def test_toggle_persists_and_reload_reapplies_dark() -> None:
    backing: dict = {}
    vm = ThemeVM(MappingThemeStorage(backing))
    vm.load()

    assert vm.toggle() is ThemeMode.DARK
    assert backing[THEME_KEY] == "dark"

    applied = []
    reloaded = ThemeVM(MappingThemeStorage(backing), on_apply=applied.append)
    assert reloaded.load() is ThemeMode.DARK
    assert reloaded.is_dark
    assert applied == [ThemeMode.DARK]


def test_toggle_twice_returns_to_light() -> None:
    backing: dict = {}
    vm = ThemeVM(MappingThemeStorage(backing))
    vm.load()

    vm.toggle()
    vm.toggle()

    assert vm.mode is ThemeMode.LIGHT
    assert backing[THEME_KEY] == "light"


def test_unknown_stored_value_falls_back_to_light() -> None:
    vm = ThemeVM(MappingThemeStorage({THEME_KEY: "sepia"}))

    assert vm.load() is ThemeMode.LIGHT
