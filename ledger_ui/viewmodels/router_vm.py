from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional

LOGGER = logging.getLogger(__name__)


class ViewRouter:
    """Keeps exactly one of a fixed set of views visible, no I/O here.

    The router starts with nothing visible; :meth:`bootstrap` selects the home
    view. ``on_change`` receives the complete visibility map after each
    navigation, never an intermediate state.
    """

    def __init__(
        self,
        view_ids: Iterable[str],
        home: str,
        *,
        on_change: Optional[Callable[[Dict[str, bool]], None]] = None,
    ) -> None:
        self.view_ids = tuple(view_ids)
        if home not in self.view_ids:
            raise ValueError(f"Home view '{home}' is not one of {self.view_ids}")
        self.home = home
        self.on_change = on_change
        self._visibility: Dict[str, bool] = {view_id: False for view_id in self.view_ids}

    @property
    def visibility(self) -> Dict[str, bool]:
        return dict(self._visibility)

    @property
    def current(self) -> Optional[str]:
        for view_id, visible in self._visibility.items():
            if visible:
                return view_id
        return None

    def is_visible(self, view_id: str) -> bool:
        return self._visibility.get(view_id, False)

    def navigate(self, view_id: str) -> None:
        """Show ``view_id`` and hide every other view."""
        if view_id not in self._visibility:
            LOGGER.error("Unknown view id '%s'; known views: %s", view_id, ", ".join(self.view_ids))
        self._visibility = {known: known == view_id for known in self.view_ids}
        if self.on_change:
            self.on_change(self.visibility)

    def bootstrap(self) -> None:
        self.navigate(self.home)

    def back(self) -> None:
        self.navigate(self.home)

    def nav_handler(self, view_id: str) -> Callable[[], None]:
        """Zero-argument callback for a navigation control."""
        return lambda: self.navigate(view_id)
