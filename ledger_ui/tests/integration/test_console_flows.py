"""End-to-end binder flows over the real transport with a stubbed session."""

from __future__ import annotations

import asyncio
import json

from ledger_ui.adapters.http_client import HttpConfig, JsonTransport
from ledger_ui.domain.catalog import BINDINGS
from ledger_ui.tests.fakes import FakeButton, FakeForm, FakeTarget, ResponseStub, SessionStub
from ledger_ui.usecases.binder_registry import BinderRegistry


def _registry(*responses) -> tuple[BinderRegistry, SessionStub]:
    session = SessionStub(responses)
    transport = JsonTransport(HttpConfig(base_url="http://ledger"), session=session)  # type: ignore[arg-type]
    return BinderRegistry(transport), session


def test_transfer_success_renders_labeled_lines() -> None:
    registry, session = _registry(
        ResponseStub(200, '{"tx_id":"abc123","status":"confirmed"}', {"tx_id": "abc123", "status": "confirmed"})
    )
    form = FakeForm({"sender": "A", "receiver": "B", "amount": "5", "nonce": "1", "key": "k"})
    target = FakeTarget()
    registry.register_all(BINDINGS, {"admin-transfer-form": form}, {"admin-transfer-result": target})

    asyncio.run(form.handlers[0]())

    call = session.calls[0]
    assert call["url"] == "http://ledger/transactions/transfer"
    assert json.loads(call["data"]) == {"sender": "A", "receiver": "B", "amount": 5, "nonce": 1, "private_key": "k"}
    assert target.text.splitlines() == ["tx_id: abc123", "status: confirmed"]


def test_bad_request_renders_body_and_reenables_button() -> None:
    registry, _ = _registry(ResponseStub(400, "insufficient balance"))
    button = FakeButton("Register")
    target = FakeTarget()
    registry.register_all(BINDINGS, {"system-register-btn": button}, {"system-register-result": target})

    asyncio.run(button.handlers[0]())

    assert target.text == "insufficient balance"
    assert target.shown[-1].kind == "text"
    assert (button.enabled, button.label) == (True, "Register")


def test_lookup_not_found_renders_reason_phrase() -> None:
    registry, session = _registry(ResponseStub(404, ""))
    form = FakeForm({"address": "X1"})
    target = FakeTarget()
    registry.register_all(BINDINGS, {"user-account-form": form}, {"user-account-result": target})

    asyncio.run(form.handlers[0]())

    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://ledger/accounts/X1"
    assert target.text == "Not Found"


def test_concurrent_binders_settle_independently() -> None:
    registry, _ = _registry(
        ResponseStub(200, '{"a": 1}', {"a": 1}),
        ResponseStub(500, "down"),
    )
    register_btn = FakeButton("Register")
    status_btn = FakeButton("Refresh")
    register_out = FakeTarget()
    status_out = FakeTarget()
    registry.register_all(
        BINDINGS,
        {"system-register-btn": register_btn, "refresh-status": status_btn},
        {"system-register-result": register_out, "raft-status": status_out},
    )

    async def both() -> None:
        await asyncio.gather(register_btn.handlers[0](), status_btn.handlers[0]())

    asyncio.run(both())

    assert register_out.text == "a: 1"
    assert status_out.text == "down"
    assert register_btn.enabled and status_btn.enabled
