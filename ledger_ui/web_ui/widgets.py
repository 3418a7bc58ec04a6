"""NiceGUI implementations of the ``Control`` and ``RenderTarget`` ports."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from nicegui import ui

from ledger_ui.domain.ports import Handler
from ledger_ui.domain.render import Rendering


class ButtonControl:
    """A stand-alone action button; disabled while its request is in flight."""

    is_button = True

    def __init__(self, button: ui.button) -> None:
        self.button = button

    @property
    def label(self) -> str:
        return self.button.text

    @label.setter
    def label(self, value: str) -> None:
        self.button.set_text(value)

    @property
    def enabled(self) -> bool:
        return bool(self.button.enabled)

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.button.set_enabled(value)

    def values(self) -> Mapping[str, Any]:
        return {}

    def subscribe(self, handler: Handler) -> None:
        self.button.on_click(handler)


class FormControl:
    """Named inputs plus a submit button; Enter in any input also submits."""

    is_button = False

    def __init__(self, inputs: Dict[str, ui.input], submit: ui.button) -> None:
        self.inputs = inputs
        self.submit = submit

    @property
    def label(self) -> str:
        return self.submit.text

    @label.setter
    def label(self, value: str) -> None:
        self.submit.set_text(value)

    @property
    def enabled(self) -> bool:
        return bool(self.submit.enabled)

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.submit.set_enabled(value)

    def values(self) -> Mapping[str, Any]:
        return {name: "" if field.value is None else field.value for name, field in self.inputs.items()}

    def subscribe(self, handler: Handler) -> None:
        self.submit.on_click(handler)
        for field in self.inputs.values():
            field.on("keydown.enter", handler)


class ResultPanel:
    """Result area: plain text as a pre-wrapped label, entries as key/body rows."""

    def __init__(self, container: ui.element) -> None:
        self.container = container

    def show(self, rendering: Rendering) -> None:
        self.container.clear()
        with self.container:
            if rendering.kind == "text":
                ui.label(rendering.text).classes("ledger-result")
                return
            for entry in rendering.entries:
                with ui.row().classes("items-start no-wrap gap-1"):
                    ui.label(f"{entry.key}:").classes("ledger-key")
                    body = ui.label(entry.body).classes("ledger-result")
                    if entry.nested:
                        body.classes("ledger-mono")
