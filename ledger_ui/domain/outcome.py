"""Result type returned by the JSON transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Success:
    """Decoded response body; ``None`` for a 204 response."""

    value: Any = None


@dataclass(frozen=True)
class Failure:
    """Displayable failure text plus the underlying error, if any."""

    message: str
    error: Optional[Exception] = None


RequestOutcome = Union[Success, Failure]

__all__ = ["Success", "Failure", "RequestOutcome"]
