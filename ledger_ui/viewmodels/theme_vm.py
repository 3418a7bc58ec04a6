from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from ledger_ui.domain.ports import ThemeStoragePort

LOGGER = logging.getLogger(__name__)


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class ThemeVM:
    """Light/dark preference, read once at startup and written on toggle."""

    def __init__(
        self,
        storage: ThemeStoragePort,
        *,
        on_apply: Optional[Callable[[ThemeMode], None]] = None,
    ) -> None:
        self.storage = storage
        self.on_apply = on_apply
        self.mode = ThemeMode.LIGHT

    def load(self) -> ThemeMode:
        """Apply the stored preference, defaulting to light."""
        stored = self.storage.load_theme()
        try:
            self.mode = ThemeMode(stored) if stored else ThemeMode.LIGHT
        except ValueError:
            LOGGER.warning("Ignoring unknown stored theme '%s'", stored)
            self.mode = ThemeMode.LIGHT
        self._apply()
        return self.mode

    def toggle(self) -> ThemeMode:
        self.mode = ThemeMode.LIGHT if self.mode is ThemeMode.DARK else ThemeMode.DARK
        self.storage.save_theme(self.mode.value)
        self._apply()
        return self.mode

    @property
    def is_dark(self) -> bool:
        return self.mode is ThemeMode.DARK

    def _apply(self) -> None:
        if self.on_apply:
            self.on_apply(self.mode)
