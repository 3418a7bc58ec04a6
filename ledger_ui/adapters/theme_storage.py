from __future__ import annotations

from typing import Any, MutableMapping, Optional

from ledger_ui.domain.ports import ThemeStoragePort

THEME_KEY = "ledger_theme"


class MappingThemeStorage(ThemeStoragePort):
    """Theme preference kept in a key/value mapping.

    In the web runtime the mapping is NiceGUI's ``app.storage.user``, which is
    scoped to the browser and survives reloads. Tests pass a plain ``dict``.
    """

    def __init__(self, mapping: MutableMapping[str, Any], key: str = THEME_KEY) -> None:
        self.mapping = mapping
        self.key = key

    def load_theme(self) -> Optional[str]:
        value = self.mapping.get(self.key)
        if value is None:
            return None
        return str(value)

    def save_theme(self, mode: str) -> None:
        self.mapping[self.key] = mode
