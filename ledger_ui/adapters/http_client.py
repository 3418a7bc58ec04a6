"""JSON transport for the ledger HTTP API.

This module wraps ``requests.Session`` and turns every response into a
``RequestOutcome``: callers never see transport exceptions, only ``Success``
or ``Failure`` values that the binders render.

Dependencies:
    - ``requests`` for network I/O.
    - ``ledger_ui.adapters.api_errors`` for the typed failure carried by
      ``Failure.error``.

Call context:
    - Constructed once by ``ledger_ui/web_ui/runtime.py``.
    - Called by ``ledger_ui.usecases.binder_registry.Binder`` on a worker
      thread supplied by the web runtime.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from ledger_ui.adapters.api_errors import ApiDecodeError, ApiNetworkError, ApiServerError
from ledger_ui.domain.outcome import Failure, RequestOutcome, Success

LOGGER = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """Endpoint and timeout configuration for the transport.

    Attributes:
        base_url: Scheme/host prefix joined with every request path.
        request_timeout_s: Timeout in seconds, ``None`` waits indefinitely.
    """

    base_url: str = "http://127.0.0.1:8080"
    request_timeout_s: Optional[float] = None


def reason_phrase(resp: Any) -> str:
    """Standard reason phrase for ``resp.status_code``."""
    status = getattr(resp, "status_code", 0)
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return str(getattr(resp, "reason", "") or f"HTTP {status}")


class JsonTransport:
    """Send JSON requests and normalize responses into outcomes.

    No retries and no caching: one call issues exactly one HTTP request.
    """

    def __init__(self, cfg: Optional[HttpConfig] = None, session: Optional[requests.Session] = None) -> None:
        self.cfg = cfg or HttpConfig()
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.cfg.base_url.rstrip('/')}/{path.lstrip('/')}"

    @staticmethod
    def _headers(json_body: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def send(self, path: str, method: str = "GET", body: Any = None) -> RequestOutcome:
        """Issue one request and classify the response.

        Args:
            path: Resource path with parameters already interpolated.
            method: ``GET`` or ``POST``.
            body: JSON-serializable payload for POST; ignored for GET.

        Returns:
            ``Success(None)`` for 204, ``Success(decoded)`` for other 2xx,
            otherwise ``Failure`` carrying the displayable message.
        """
        method = method.upper()
        url = self._url(path)
        context = f"{method} {url}"
        try:
            if method == "POST":
                data = None if body is None else json.dumps(body)
                resp = self.session.post(
                    url,
                    data=data,
                    headers=self._headers(json_body=True),
                    timeout=self.cfg.request_timeout_s,
                )
            else:
                resp = self.session.get(
                    url,
                    headers=self._headers(json_body=False),
                    timeout=self.cfg.request_timeout_s,
                )
        except req_exc.RequestException as exc:
            LOGGER.debug("%s failed before a response: %s", context, exc)
            return Failure(str(exc), ApiNetworkError(str(exc), context=context))

        status = resp.status_code
        if not 200 <= status < 300:
            message = resp.text or reason_phrase(resp)
            LOGGER.debug("%s -> HTTP %s: %s", context, status, message)
            return Failure(message, ApiServerError(message, status=status, context=context))

        if status == HTTPStatus.NO_CONTENT:
            return Success(None)
        try:
            return Success(resp.json())
        except ValueError as exc:
            LOGGER.debug("%s -> HTTP %s with undecodable body: %s", context, status, exc)
            return Failure(str(exc), ApiDecodeError(str(exc), status=status, context=context))


__all__ = ["HttpConfig", "JsonTransport", "reason_phrase"]
