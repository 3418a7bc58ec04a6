from __future__ import annotations

import pytest

from ledger_ui.domain.bindings import BindingKind
from ledger_ui.domain.catalog import BINDINGS, HOME_VIEW, STATUS_BINDING, VIEW_IDS

FORM_VALUES = {
    "sender": "S",
    "receiver": "R",
    "amount": "3",
    "nonce": "2",
    "key": "K",
    "creator": "C",
    "target": "T",
    "admin": "ADM",
    "address": "ADDR",
    "node_id": "n2",
    "raft_address": "127.0.0.1:7001",
    "index": "4",
}

BY_CONTROL = {binding.control_id: binding for binding in BINDINGS}


@pytest.mark.parametrize(
    "control_id, method, path, payload",
    [
        ("system-register-btn", "POST", "/accounts/register", None),
        ("admin-account-form", "GET", "/accounts/ADDR", None),
        ("user-account-form", "GET", "/accounts/ADDR", None),
        (
            "founder-promote-form",
            "POST",
            "/accounts/promote",
            {"creator_address": "C", "target_address": "T", "private_key": "K"},
        ),
        (
            "founder-demote-form",
            "POST",
            "/accounts/demote",
            {"creator_address": "C", "target_address": "T", "private_key": "K"},
        ),
        (
            "founder-mint-form",
            "POST",
            "/transactions/mint",
            {"sender": "S", "receiver": "R", "amount": 3, "nonce": 2, "private_key": "K"},
        ),
        (
            "user-transfer-form",
            "POST",
            "/transactions/transfer",
            {"sender": "S", "receiver": "R", "amount": 3, "nonce": 2, "private_key": "K"},
        ),
        (
            "admin-freeze-form",
            "POST",
            "/transactions/freeze",
            {"sender": "ADM", "receiver": "T", "amount": 0, "nonce": 0, "private_key": "K"},
        ),
        (
            "admin-unfreeze-form",
            "POST",
            "/transactions/unfreeze",
            {"sender": "ADM", "receiver": "T", "amount": 0, "nonce": 0, "private_key": "K"},
        ),
        (
            "founder-query-form",
            "POST",
            "/transactions/query",
            {"requester_address": "ADDR", "private_key": "K"},
        ),
        ("refresh-status", "GET", "/raft/status", None),
        ("cluster-audit-form", "GET", "/audit/4", None),
        ("cluster-join-form", "POST", "/raft/join", {"node_id": "n2", "raft_address": "127.0.0.1:7001"}),
        ("cluster-remove-form", "POST", "/raft/remove", {"node_id": "n2"}),
    ],
)
def test_endpoint_table(control_id: str, method: str, path: str, payload) -> None:
    binding = BY_CONTROL[control_id]

    assert binding.method == method
    assert binding.resolve_path(FORM_VALUES) == path
    assert binding.build_payload(FORM_VALUES) == payload


def test_control_ids_are_unique() -> None:
    ids = [binding.control_id for binding in BINDINGS]
    assert len(ids) == len(set(ids))


def test_only_status_runs_at_startup() -> None:
    assert [b for b in BINDINGS if b.auto_run] == [STATUS_BINDING]
    assert STATUS_BINDING.kind is BindingKind.STATUS


def test_home_view_is_known() -> None:
    assert HOME_VIEW in VIEW_IDS
    assert len(set(VIEW_IDS)) == len(VIEW_IDS)
