"""Generic binder execution for declarative bindings.

A :class:`Binder` owns one control, one target and one :class:`Binding`. Every
binding in the catalog runs through the same :meth:`Binder.invoke` routine:
read inputs, enter the in-flight state, send, render, settle.

Dependencies:
    - ``ledger_ui.domain.bindings`` for payload and path construction.
    - ``ledger_ui.domain.render`` for result display.
    - A ``TransportPort`` implementation (``JsonTransport`` at runtime).

Call context:
    ``ledger_ui/web_ui/main.py`` builds the page widgets, then calls
    :meth:`BinderRegistry.register_all` and :meth:`BinderRegistry.run_startup`.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Iterable, List, Mapping, Optional

from ledger_ui.domain.bindings import Binding, BindingKind
from ledger_ui.domain.outcome import Failure, RequestOutcome, Success
from ledger_ui.domain.ports import Control, RenderTarget, TransportPort
from ledger_ui.domain.render import Rendering, pretty_json, render, render_error

LOGGER = logging.getLogger(__name__)

STATUS_UNAVAILABLE_TEXT = "status unavailable"

IoRunner = Callable[..., Awaitable[Any]]


async def run_inline(func: Callable[..., Any], *args: Any) -> Any:
    """Default runner: call ``func`` on the event loop thread."""
    return func(*args)


class Binder:
    """One control wired to one request/render cycle."""

    def __init__(
        self,
        binding: Binding,
        control: Control,
        target: RenderTarget,
        transport: TransportPort,
        io_bound: IoRunner = run_inline,
    ) -> None:
        self.binding = binding
        self.control = control
        self.target = target
        self.transport = transport
        self.io_bound = io_bound

    async def invoke(self) -> None:
        """Run one invocation; never raises past this call."""
        binding = self.binding
        values: Mapping[str, Any] = self.control.values() if binding.reads_form else {}
        path = binding.resolve_path(values)
        if path is None:
            LOGGER.debug("%s: lookup field '%s' empty, no request", binding.control_id, binding.lookup_field)
            return

        is_button = bool(self.control.is_button)
        original_label = self.control.label
        if is_button:
            self.control.enabled = False
            self.control.label = binding.busy_text
        self.target.show(Rendering.plain(binding.busy_text))
        try:
            payload = binding.build_payload(values)
            outcome: RequestOutcome = await self.io_bound(
                self.transport.send, path, binding.method, payload
            )
            if isinstance(outcome, Success):
                self._show_success(outcome.value)
            else:
                self._show_failure(outcome, path)
        except Exception as exc:
            LOGGER.exception("%s %s raised", binding.method, path)
            self._show_failure(Failure(str(exc), exc), path)
        finally:
            if is_button:
                self.control.enabled = True
                self.control.label = original_label

    def _show_success(self, value: Any) -> None:
        if self.binding.kind is BindingKind.STATUS:
            self.target.show(Rendering.plain(pretty_json(value)))
            return
        render(self.target, value)

    def _show_failure(self, outcome: Failure, path: str) -> None:
        LOGGER.warning(
            "%s %s failed: %s",
            self.binding.method,
            path,
            outcome.error if outcome.error is not None else outcome.message,
        )
        if self.binding.kind is BindingKind.STATUS:
            self.target.show(Rendering.plain(outcome.message or STATUS_UNAVAILABLE_TEXT))
            return
        render_error(self.target, outcome.message)


class BinderRegistry:
    """Create binders for the controls a page actually provides."""

    def __init__(self, transport: TransportPort, io_bound: IoRunner = run_inline) -> None:
        self.transport = transport
        self.io_bound = io_bound
        self.binders: List[Binder] = []

    def register(
        self,
        binding: Binding,
        controls: Mapping[str, Control],
        targets: Mapping[str, RenderTarget],
    ) -> Optional[Binder]:
        """Wire ``binding`` if both its control and target exist.

        Returns:
            The subscribed binder, or ``None`` when the page lacks either
            element (nothing is subscribed in that case).
        """
        control = controls.get(binding.control_id)
        target = targets.get(binding.target_id)
        if control is None or target is None:
            LOGGER.debug("Skipping binding %s: control or target not on page", binding.control_id)
            return None
        binder = Binder(binding, control, target, self.transport, self.io_bound)
        control.subscribe(binder.invoke)
        self.binders.append(binder)
        return binder

    def register_all(
        self,
        bindings: Iterable[Binding],
        controls: Mapping[str, Control],
        targets: Mapping[str, RenderTarget],
    ) -> List[Binder]:
        registered = []
        for binding in bindings:
            binder = self.register(binding, controls, targets)
            if binder is not None:
                registered.append(binder)
        return registered

    async def run_startup(self) -> None:
        """Invoke every registered binder flagged ``auto_run`` once."""
        for binder in self.binders:
            if binder.binding.auto_run:
                await binder.invoke()


__all__ = ["Binder", "BinderRegistry", "STATUS_UNAVAILABLE_TEXT", "run_inline"]
