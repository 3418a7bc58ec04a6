from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol

from .outcome import RequestOutcome
from .render import Rendering

Handler = Callable[[], Awaitable[None]]


# ---- Ports (Hexagonal boundaries) ----
class TransportPort(Protocol):
    """Issue one JSON request against the ledger API."""

    def send(self, path: str, method: str = "GET", body: Any = None) -> RequestOutcome: ...


class RenderTarget(Protocol):
    """Display surface for a rendered response or a busy/error text."""

    def show(self, rendering: Rendering) -> None: ...


class Control(Protocol):
    """Interactive trigger: a plain button or a form with a submit action.

    ``is_button`` decides whether the control is disabled while in flight.
    ``values`` returns the current form inputs (empty for buttons).
    """

    is_button: bool
    label: str
    enabled: bool

    def values(self) -> Mapping[str, Any]: ...
    def subscribe(self, handler: Handler) -> None: ...


class ThemeStoragePort(Protocol):
    """Persistence for the single theme preference value."""

    def load_theme(self) -> Optional[str]: ...
    def save_theme(self, mode: str) -> None: ...
