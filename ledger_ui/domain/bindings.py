"""Declarative bindings from UI controls to ledger API calls.

A :class:`Binding` names the control that triggers a request, the target that
shows the result, the endpoint, and a table of :class:`FieldSpec` rows that
maps form inputs to request fields. One generic binder routine interprets
every binding; nothing here performs I/O.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote


class Coercion(str, Enum):
    """How one form input becomes one request field."""

    PASS = "pass"
    NUMBER = "number"
    ZERO = "zero"


class BindingKind(str, Enum):
    """Trigger/request shape of a binding.

    ``button``: click-only POST without a body.
    ``form``: form submit, POST with a JSON body built from ``fields``.
    ``lookup``: form submit, GET on ``path`` with one input substituted.
    ``status``: click (and optionally startup) GET rendered as raw JSON text.
    """

    BUTTON = "button"
    FORM = "form"
    LOOKUP = "lookup"
    STATUS = "status"


_MISSING = object()


def coerce_number(raw: Any) -> Any:
    """Parse ``raw`` as a number without rejecting anything.

    Blank text becomes ``0``. Whole-number text such as ``5.0``, ``1e2`` or
    ``0x10`` becomes an ``int`` so it serializes without a fraction. Text
    that does not parse as a finite number is returned unchanged so the
    backend sees (and rejects) what was typed.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, (int, float)):
        return raw
    text = str(raw).strip()
    if not text:
        return 0
    if "_" in text:
        return raw
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return raw
    if not math.isfinite(value):
        return raw
    if value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class FieldSpec:
    """One row of a payload shape: request field <- form input."""

    output: str
    source: Optional[str] = None
    coercion: Coercion = Coercion.PASS

    def resolve(self, values: Mapping[str, Any]) -> Any:
        if self.coercion is Coercion.ZERO:
            return 0
        raw = values.get(self.source or self.output, _MISSING)
        if raw is _MISSING:
            return _MISSING
        if self.coercion is Coercion.NUMBER:
            return coerce_number(raw)
        return raw


@dataclass(frozen=True)
class Binding:
    """Association of one control and one target with one endpoint."""

    control_id: str
    target_id: str
    path: str
    kind: BindingKind = BindingKind.FORM
    method: str = "POST"
    fields: Tuple[FieldSpec, ...] = ()
    busy_text: str = "submitting"
    lookup_field: Optional[str] = None
    auto_run: bool = False

    @property
    def reads_form(self) -> bool:
        return self.kind in (BindingKind.FORM, BindingKind.LOOKUP)

    def resolve_path(self, values: Mapping[str, Any]) -> Optional[str]:
        """Return the request path, or ``None`` when a lookup input is empty."""
        if self.kind is not BindingKind.LOOKUP:
            return self.path
        field = self.lookup_field or ""
        raw = values.get(field)
        if raw is None:
            return None
        text = str(raw)
        if not text:
            return None
        return self.path.format(**{field: quote(text, safe="")})

    def build_payload(self, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Build the JSON body for ``form`` bindings; ``None`` for the rest.

        Inputs missing from ``values`` leave their field out of the body.
        """
        if self.kind is not BindingKind.FORM:
            return None
        payload: Dict[str, Any] = {}
        for field_spec in self.fields:
            value = field_spec.resolve(values)
            if value is _MISSING:
                continue
            payload[field_spec.output] = value
        return payload


__all__ = ["Binding", "BindingKind", "Coercion", "FieldSpec", "coerce_number"]
