"""Views and bindings of the ledger console.

Control ids double as widget keys in the web page: a binding only becomes
active when the page actually provides both its control and its target.
"""

from __future__ import annotations

from typing import Tuple

from .bindings import Binding, BindingKind, Coercion, FieldSpec

HOME_VIEW = "view-home"
VIEW_IDS: Tuple[str, ...] = (
    HOME_VIEW,
    "view-system",
    "view-founder",
    "view-admin",
    "view-user",
    "view-cluster",
)

ROLE_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("creator_address", "creator"),
    FieldSpec("target_address", "target"),
    FieldSpec("private_key", "key"),
)

TRANSACTION_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("sender", "sender"),
    FieldSpec("receiver", "receiver"),
    FieldSpec("amount", "amount", Coercion.NUMBER),
    FieldSpec("nonce", "nonce", Coercion.NUMBER),
    FieldSpec("private_key", "key"),
)

FREEZE_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("sender", "admin"),
    FieldSpec("receiver", "target"),
    FieldSpec("amount", coercion=Coercion.ZERO),
    FieldSpec("nonce", coercion=Coercion.ZERO),
    FieldSpec("private_key", "key"),
)

QUERY_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("requester_address", "address"),
    FieldSpec("private_key", "key"),
)


def _register(control_id: str, target_id: str) -> Binding:
    return Binding(
        control_id,
        target_id,
        "/accounts/register",
        kind=BindingKind.BUTTON,
        busy_text="in progress",
    )


def _account_lookup(control_id: str, target_id: str) -> Binding:
    return Binding(
        control_id,
        target_id,
        "/accounts/{address}",
        kind=BindingKind.LOOKUP,
        method="GET",
        busy_text="querying",
        lookup_field="address",
    )


def _mint(control_id: str, target_id: str) -> Binding:
    return Binding(control_id, target_id, "/transactions/mint", fields=TRANSACTION_FIELDS, busy_text="submitting")


def _transfer(control_id: str, target_id: str) -> Binding:
    return Binding(control_id, target_id, "/transactions/transfer", fields=TRANSACTION_FIELDS, busy_text="sending")


def _role(control_id: str, target_id: str, path: str) -> Binding:
    return Binding(control_id, target_id, path, fields=ROLE_FIELDS, busy_text="executing")


def _freeze(control_id: str, target_id: str, path: str) -> Binding:
    return Binding(control_id, target_id, path, fields=FREEZE_FIELDS, busy_text="executing")


def _query(control_id: str, target_id: str) -> Binding:
    return Binding(control_id, target_id, "/transactions/query", fields=QUERY_FIELDS, busy_text="querying")


STATUS_BINDING = Binding(
    "refresh-status",
    "raft-status",
    "/raft/status",
    kind=BindingKind.STATUS,
    method="GET",
    busy_text="refreshing",
    auto_run=True,
)

BINDINGS: Tuple[Binding, ...] = (
    _register("system-register-btn", "system-register-result"),
    _mint("founder-mint-form", "founder-mint-result"),
    _role("founder-promote-form", "founder-promote-result", "/accounts/promote"),
    _role("founder-demote-form", "founder-demote-result", "/accounts/demote"),
    _query("founder-query-form", "founder-query-result"),
    _account_lookup("admin-account-form", "admin-account-result"),
    _transfer("admin-transfer-form", "admin-transfer-result"),
    _freeze("admin-freeze-form", "admin-freeze-result", "/transactions/freeze"),
    _freeze("admin-unfreeze-form", "admin-unfreeze-result", "/transactions/unfreeze"),
    _query("admin-query-form", "admin-query-result"),
    _account_lookup("user-account-form", "user-account-result"),
    _transfer("user-transfer-form", "user-transfer-result"),
    _query("user-query-form", "user-query-result"),
    Binding(
        "cluster-audit-form",
        "cluster-audit-result",
        "/audit/{index}",
        kind=BindingKind.LOOKUP,
        method="GET",
        busy_text="querying",
        lookup_field="index",
    ),
    Binding(
        "cluster-join-form",
        "cluster-join-result",
        "/raft/join",
        fields=(FieldSpec("node_id"), FieldSpec("raft_address")),
        busy_text="executing",
    ),
    Binding(
        "cluster-remove-form",
        "cluster-remove-result",
        "/raft/remove",
        fields=(FieldSpec("node_id"),),
        busy_text="executing",
    ),
    STATUS_BINDING,
)


__all__ = [
    "BINDINGS",
    "FREEZE_FIELDS",
    "HOME_VIEW",
    "QUERY_FIELDS",
    "ROLE_FIELDS",
    "STATUS_BINDING",
    "TRANSACTION_FIELDS",
    "VIEW_IDS",
]
