from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ledger_ui.adapters.theme_storage import THEME_KEY

ENV_API_BASE_URL = "LEDGER_UI_API_BASE_URL"
ENV_REQUEST_TIMEOUT_S = "LEDGER_UI_REQUEST_TIMEOUT_S"
ENV_STORAGE_SECRET = "LEDGER_UI_STORAGE_SECRET"

DEFAULT_API_BASE_URL = "http://127.0.0.1:8080"
DEFAULT_STORAGE_SECRET = "ledger-ui-secret"


@dataclass(frozen=True)
class SettingsConfig:
    """Typed runtime settings for the web console.

    Attributes:
        api_base_url: Ledger API prefix joined with every request path.
        request_timeout_s: Per-request timeout, ``None`` for no timeout.
        storage_secret: Secret NiceGUI uses to sign per-browser storage.
        theme_key: Storage key of the theme preference.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_s: Optional[float] = None
    storage_secret: str = DEFAULT_STORAGE_SECRET
    theme_key: str = THEME_KEY

    def with_overrides(self, **overrides: Any) -> "SettingsConfig":
        """Return a copy with the non-``None`` overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "api_base_url" in changes:
            changes["api_base_url"] = _coerce_url(changes["api_base_url"], self.api_base_url)
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload.pop("storage_secret", None)
        return payload


def _coerce_url(value: Any, fallback: str) -> str:
    text = str(value or "").strip().rstrip("/")
    return text or fallback


def _coerce_timeout(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        timeout = float(value)
    except ValueError:
        return None
    return timeout if timeout > 0 else None


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> SettingsConfig:
    """Build settings from ``LEDGER_UI_*`` environment variables."""
    env = os.environ if environ is None else environ
    return SettingsConfig(
        api_base_url=_coerce_url(env.get(ENV_API_BASE_URL), DEFAULT_API_BASE_URL),
        request_timeout_s=_coerce_timeout(env.get(ENV_REQUEST_TIMEOUT_S)),
        storage_secret=env.get(ENV_STORAGE_SECRET) or DEFAULT_STORAGE_SECRET,
    )


__all__ = ["SettingsConfig", "settings_from_env"]
