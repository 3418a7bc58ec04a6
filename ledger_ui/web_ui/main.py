"""NiceGUI entrypoint for the ledger console."""

from __future__ import annotations

import argparse
import logging
from typing import Dict

from nicegui import Client, app, ui

from ledger_ui.domain.catalog import BINDINGS, HOME_VIEW, VIEW_IDS
from ledger_ui.domain.ports import Control, RenderTarget
from ledger_ui.utils.logging import configure_root, level_name
from ledger_ui.viewmodels.settings_vm import settings_from_env
from ledger_ui.viewmodels.theme_vm import ThemeMode
from ledger_ui.web_ui.layout import VIEW_TITLES, ActionPanel, panels_for
from ledger_ui.web_ui.runtime import WebRuntime
from ledger_ui.web_ui.widgets import ButtonControl, FormControl, ResultPanel

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the console."""
    ui.add_head_html(
        """
<style>
:root {
  --ledger-card: rgba(255, 255, 255, 0.9);
  --ledger-border: #d9dfeb;
  --ledger-accent: #2457ff;
}
body.body--dark {
  --ledger-card: rgba(30, 34, 44, 0.9);
  --ledger-border: #3a4252;
}
.ledger-page { max-width: 1100px; margin: 0 auto; padding: 14px; }
.ledger-card {
  background: var(--ledger-card);
  border: 1px solid var(--ledger-border);
  border-radius: 12px;
}
.ledger-result { white-space: pre-wrap; word-break: break-all; }
.ledger-key { font-weight: 700; color: var(--ledger-accent); }
.ledger-mono { font-family: monospace; }
</style>
        """
    )


def _build_panel(
    panel: ActionPanel,
    controls: Dict[str, Control],
    targets: Dict[str, RenderTarget],
) -> None:
    """Create one card with its inputs, trigger and result area."""
    with ui.card().classes("ledger-card w-full q-pa-sm"):
        ui.label(panel.title).classes("text-subtitle1")
        inputs: Dict[str, ui.input] = {}
        if panel.inputs:
            with ui.row().classes("w-full q-gutter-sm items-end"):
                for field in panel.inputs:
                    inputs[field.name] = ui.input(
                        field.label,
                        password=field.secret,
                    ).props("dense outlined")
        button = ui.button(panel.submit_label, color="primary")
        controls[panel.control_id] = FormControl(inputs, button) if inputs else ButtonControl(button)
        targets[panel.target_id] = ResultPanel(ui.column().classes("w-full q-mt-sm"))


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI page for the runtime."""

    @ui.page("/")
    async def index(client: Client) -> None:
        dark = ui.dark_mode()
        views: Dict[str, ui.column] = {}
        controls: Dict[str, Control] = {}
        targets: Dict[str, RenderTarget] = {}

        def apply_visibility(visibility: Dict[str, bool]) -> None:
            for view_id, visible in visibility.items():
                views[view_id].set_visibility(visible)

        def apply_theme(mode: ThemeMode) -> None:
            if mode is ThemeMode.DARK:
                dark.enable()
            else:
                dark.disable()

        router = runtime.new_router(on_change=apply_visibility)
        theme_vm = runtime.new_theme(app.storage.user, on_apply=apply_theme)

        with ui.column().classes("ledger-page w-full"):
            with ui.row().classes("w-full justify-between items-center ledger-card p-3"):
                ui.label("Ledger Console").classes("text-h5")
                ui.button("Toggle theme", on_click=theme_vm.toggle).props("flat")

            for view_id in VIEW_IDS:
                with ui.column().classes("w-full q-gutter-sm") as view:
                    if view_id == HOME_VIEW:
                        with ui.row().classes("q-gutter-sm"):
                            for other in VIEW_IDS:
                                if other != HOME_VIEW:
                                    ui.button(VIEW_TITLES[other], on_click=router.nav_handler(other))
                    else:
                        with ui.row().classes("items-center q-gutter-sm"):
                            ui.button("Back", on_click=router.back).props("flat")
                            ui.label(VIEW_TITLES[view_id]).classes("text-h6")
                    for panel in panels_for(view_id):
                        _build_panel(panel, controls, targets)
                view.set_visibility(False)
                views[view_id] = view

        registry = runtime.new_registry()
        registry.register_all(BINDINGS, controls, targets)
        theme_vm.load()
        router.bootstrap()

        await client.connected()
        await registry.run_startup()


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the ledger console NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8081)
    parser.add_argument("--api-base-url", default=None, help="Ledger API base URL")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    level = configure_root()
    LOGGER.info("Log level %s", level_name(level))
    settings = settings_from_env().with_overrides(api_base_url=args.api_base_url)
    runtime = WebRuntime(settings)
    if args.smoke_test:
        print("web-smoke-ok", runtime.settings_payload())
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="Ledger Console",
        reload=args.reload,
        show=False,
        storage_secret=runtime.settings.storage_secret,
    )


if __name__ == "__main__":
    main()
