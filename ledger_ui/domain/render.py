"""Schema-agnostic projection of JSON values into displayable content.

``project`` turns any JSON-compatible value into a :class:`Rendering`. The
branch order is fixed: string, then sequence, then mapping, then everything
else as pretty-printed JSON. ``render`` pushes the projection into a target.

Strings are never interpreted as markup; mapping entries keep the key and
its body separate so views can style the key without building HTML.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Tuple

DEFAULT_ERROR_TEXT = "request failed"


@dataclass(frozen=True)
class LabeledEntry:
    """One ``key: body`` line of a rendered mapping."""

    key: str
    body: str
    nested: bool = False

    def as_text(self) -> str:
        return f"{self.key}: {self.body}"


@dataclass(frozen=True)
class Rendering:
    """Either plain text or a sequence of labeled entries."""

    kind: Literal["text", "entries"]
    text: str = ""
    entries: Tuple[LabeledEntry, ...] = ()

    @classmethod
    def plain(cls, text: str) -> "Rendering":
        return cls(kind="text", text=text)

    @classmethod
    def labeled(cls, entries: Tuple[LabeledEntry, ...]) -> "Rendering":
        return cls(kind="entries", entries=tuple(entries))

    def as_text(self) -> str:
        """Flatten to the text a user would read, entries newline-separated."""
        if self.kind == "text":
            return self.text
        return "\n".join(entry.as_text() for entry in self.entries)


def _integral_floats_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {key: _integral_floats_to_int(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_integral_floats_to_int(item) for item in value]
    return value


def pretty_json(value: Any) -> str:
    """Indented JSON text, whole floats without ``.0``; never raises."""
    try:
        return json.dumps(_integral_floats_to_int(value), indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError, RecursionError):
        return repr(value)


def scalar_text(value: Any) -> str:
    """Plain form of a scalar, spelled the way the JSON source spelled it."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return str(value)


def _is_nested(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def project(value: Any) -> Rendering:
    """Project ``value`` into a rendering.

    Args:
        value: Any decoded JSON value (or a message string).

    Returns:
        Plain text for strings, sequences and scalars; labeled entries for
        mappings.
    """
    if isinstance(value, str):
        return Rendering.plain(value)
    if isinstance(value, (list, tuple)):
        blocks = [f"[#{idx}]\n{pretty_json(item)}" for idx, item in enumerate(value, start=1)]
        return Rendering.plain("\n\n".join(blocks))
    if isinstance(value, Mapping):
        entries = []
        for key, item in value.items():
            nested = _is_nested(item)
            body = pretty_json(item) if nested else scalar_text(item)
            entries.append(LabeledEntry(key=str(key), body=body, nested=nested))
        return Rendering.labeled(tuple(entries))
    return Rendering.plain(pretty_json(value))


def render(target: Any, value: Any) -> None:
    """Replace the content of ``target`` with the projection of ``value``."""
    target.show(project(value))


def render_error(target: Any, message: Any) -> None:
    """Render a failure message, substituting the default placeholder."""
    render(target, message or DEFAULT_ERROR_TEXT)


__all__ = [
    "DEFAULT_ERROR_TEXT",
    "LabeledEntry",
    "Rendering",
    "pretty_json",
    "project",
    "render",
    "render_error",
    "scalar_text",
]
