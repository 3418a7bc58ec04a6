from __future__ import annotations

import json

import pytest

from ledger_ui.domain.render import (
    DEFAULT_ERROR_TEXT,
    LabeledEntry,
    Rendering,
    project,
    render,
    render_error,
    scalar_text,
)
from ledger_ui.tests.fakes import FakeTarget


@pytest.mark.parametrize("text", ["", "plain", "<b>not bold</b>", "line1\nline2"])
def test_string_is_shown_verbatim(text: str) -> None:
    assert project(text) == Rendering.plain(text)


def test_sequence_renders_numbered_blocks_in_order() -> None:
    items = [{"a": 1}, "two", 3]

    text = project(items).as_text()

    blocks = text.split("\n\n")
    assert len(blocks) == 3
    assert blocks[0] == "[#1]\n" + json.dumps({"a": 1}, indent=2)
    assert blocks[1] == '[#2]\n"two"'
    assert blocks[2] == "[#3]\n3"


def test_empty_sequence_renders_empty_text() -> None:
    assert project([]) == Rendering.plain("")


def test_mapping_keeps_key_order_and_nests_pretty_json() -> None:
    value = {"z": "last?", "nested": {"k": [1, 2]}, "count": 2, "flag": False, "none": None}

    rendering = project(value)

    assert rendering.kind == "entries"
    assert [entry.key for entry in rendering.entries] == ["z", "nested", "count", "flag", "none"]
    assert rendering.entries[0] == LabeledEntry("z", "last?")
    assert rendering.entries[1] == LabeledEntry("nested", json.dumps({"k": [1, 2]}, indent=2), nested=True)
    assert rendering.entries[2].body == "2"
    assert rendering.entries[3].body == "false"
    assert rendering.entries[4].body == "null"


def test_mapping_text_is_newline_separated_without_blank_lines() -> None:
    text = project({"tx_id": "abc123", "status": "confirmed"}).as_text()

    assert text == "tx_id: abc123\nstatus: confirmed"


def test_empty_nested_values_are_pretty_json() -> None:
    rendering = project({"obj": {}, "arr": []})

    assert [(e.body, e.nested) for e in rendering.entries] == [("{}", True), ("[]", True)]


@pytest.mark.parametrize(
    "value, expected",
    [(5, "5"), (5.0, "5"), (2.5, "2.5"), (True, "true"), (None, "null")],
)
def test_scalars_fall_through_to_pretty_json(value, expected: str) -> None:
    assert project(value) == Rendering.plain(expected)


def test_unserializable_value_does_not_raise() -> None:
    loop: list = []
    loop.append(loop)

    rendering = project(loop)

    assert rendering.kind == "text"
    assert rendering.text.startswith("[#1]")


def test_nested_integral_floats_print_without_fraction() -> None:
    rendering = project({"n": {"a": 5.0, "b": [1.0, 0.5]}})

    assert rendering.entries[0].body == '{\n  "a": 5,\n  "b": [\n    1,\n    0.5\n  ]\n}'
    assert project([5.0]).text == "[#1]\n5"


def test_scalar_text_drops_trailing_zero_of_integral_floats() -> None:
    assert scalar_text(10.0) == "10"
    assert scalar_text(0.1) == "0.1"


def test_render_pushes_projection_to_target() -> None:
    target = FakeTarget()

    render(target, {"a": 1})

    assert target.text == "a: 1"


def test_render_error_substitutes_placeholder() -> None:
    target = FakeTarget()

    render_error(target, "")

    assert target.text == DEFAULT_ERROR_TEXT
