"""Domain package exports for the binding model, outcomes and rendering."""

from .bindings import Binding, BindingKind, Coercion, FieldSpec, coerce_number
from .outcome import Failure, RequestOutcome, Success
from .render import LabeledEntry, Rendering, pretty_json, project, render

__all__ = [
    "Binding",
    "BindingKind",
    "Coercion",
    "Failure",
    "FieldSpec",
    "LabeledEntry",
    "RequestOutcome",
    "Rendering",
    "Success",
    "coerce_number",
    "pretty_json",
    "project",
    "render",
]
