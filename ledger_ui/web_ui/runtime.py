"""NiceGUI runtime composition for the ledger console.

The transport is shared by all browser clients; routers, theme viewmodels and
binder registries are created per page so that no UI state crosses clients.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, MutableMapping, Optional

from nicegui import run

from ledger_ui.adapters.http_client import HttpConfig, JsonTransport
from ledger_ui.adapters.theme_storage import MappingThemeStorage
from ledger_ui.domain.catalog import HOME_VIEW, VIEW_IDS
from ledger_ui.usecases.binder_registry import BinderRegistry
from ledger_ui.viewmodels.router_vm import ViewRouter
from ledger_ui.viewmodels.settings_vm import SettingsConfig, settings_from_env
from ledger_ui.viewmodels.theme_vm import ThemeMode, ThemeVM

LOGGER = logging.getLogger(__name__)


class WebRuntime:
    """Composition root used by the NiceGUI page."""

    def __init__(self, settings: Optional[SettingsConfig] = None) -> None:
        self.settings = settings or settings_from_env()
        self.transport = JsonTransport(
            HttpConfig(
                base_url=self.settings.api_base_url,
                request_timeout_s=self.settings.request_timeout_s,
            )
        )
        LOGGER.info("Ledger API at %s", self.settings.api_base_url)

    def settings_payload(self) -> Dict[str, Any]:
        return self.settings.to_dict()

    def new_registry(self) -> BinderRegistry:
        return BinderRegistry(self.transport, io_bound=run.io_bound)

    def new_router(self, on_change: Callable[[Dict[str, bool]], None]) -> ViewRouter:
        return ViewRouter(VIEW_IDS, HOME_VIEW, on_change=on_change)

    def new_theme(
        self,
        storage: MutableMapping[str, Any],
        on_apply: Callable[[ThemeMode], None],
    ) -> ThemeVM:
        return ThemeVM(MappingThemeStorage(storage, key=self.settings.theme_key), on_apply=on_apply)
