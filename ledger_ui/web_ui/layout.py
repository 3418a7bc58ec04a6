"""Form panels shown on each view, keyed by binding control id."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ledger_ui.domain.catalog import HOME_VIEW


@dataclass(frozen=True)
class FormInput:
    name: str
    label: str
    secret: bool = False


@dataclass(frozen=True)
class ActionPanel:
    """Card hosting one binding's control and result target."""

    view_id: str
    control_id: str
    target_id: str
    title: str
    submit_label: str
    inputs: Tuple[FormInput, ...] = ()


KEY = FormInput("key", "Private key", secret=True)
TRANSACTION_INPUTS = (
    FormInput("sender", "Sender address"),
    FormInput("receiver", "Receiver address"),
    FormInput("amount", "Amount"),
    FormInput("nonce", "Nonce"),
    KEY,
)
ROLE_INPUTS = (FormInput("creator", "Creator address"), FormInput("target", "Target address"), KEY)
FREEZE_INPUTS = (FormInput("admin", "Admin address"), FormInput("target", "Target address"), KEY)
QUERY_INPUTS = (FormInput("address", "Requester address"), KEY)
LOOKUP_INPUTS = (FormInput("address", "Account address"),)

VIEW_TITLES: Dict[str, str] = {
    HOME_VIEW: "Home",
    "view-system": "System",
    "view-founder": "Founder",
    "view-admin": "Admin",
    "view-user": "User",
    "view-cluster": "Cluster",
}

PANELS: Tuple[ActionPanel, ...] = (
    ActionPanel("view-system", "system-register-btn", "system-register-result", "Register account", "Register"),
    ActionPanel("view-founder", "founder-mint-form", "founder-mint-result", "Mint", "Mint", TRANSACTION_INPUTS),
    ActionPanel("view-founder", "founder-promote-form", "founder-promote-result", "Promote", "Promote", ROLE_INPUTS),
    ActionPanel("view-founder", "founder-demote-form", "founder-demote-result", "Demote", "Demote", ROLE_INPUTS),
    ActionPanel("view-founder", "founder-query-form", "founder-query-result", "Transactions", "Query", QUERY_INPUTS),
    ActionPanel("view-admin", "admin-account-form", "admin-account-result", "Account lookup", "Look up", LOOKUP_INPUTS),
    ActionPanel("view-admin", "admin-transfer-form", "admin-transfer-result", "Transfer", "Send", TRANSACTION_INPUTS),
    ActionPanel("view-admin", "admin-freeze-form", "admin-freeze-result", "Freeze", "Freeze", FREEZE_INPUTS),
    ActionPanel("view-admin", "admin-unfreeze-form", "admin-unfreeze-result", "Unfreeze", "Unfreeze", FREEZE_INPUTS),
    ActionPanel("view-admin", "admin-query-form", "admin-query-result", "Transactions", "Query", QUERY_INPUTS),
    ActionPanel("view-user", "user-account-form", "user-account-result", "Account lookup", "Look up", LOOKUP_INPUTS),
    ActionPanel("view-user", "user-transfer-form", "user-transfer-result", "Transfer", "Send", TRANSACTION_INPUTS),
    ActionPanel("view-user", "user-query-form", "user-query-result", "Transactions", "Query", QUERY_INPUTS),
    ActionPanel(
        "view-cluster",
        "cluster-audit-form",
        "cluster-audit-result",
        "Audit entry",
        "Look up",
        (FormInput("index", "Audit index"),),
    ),
    ActionPanel(
        "view-cluster",
        "cluster-join-form",
        "cluster-join-result",
        "Join node",
        "Join",
        (FormInput("node_id", "Node id"), FormInput("raft_address", "Raft address")),
    ),
    ActionPanel(
        "view-cluster",
        "cluster-remove-form",
        "cluster-remove-result",
        "Remove node",
        "Remove",
        (FormInput("node_id", "Node id"),),
    ),
    ActionPanel(HOME_VIEW, "refresh-status", "raft-status", "Consensus status", "Refresh"),
)


def panels_for(view_id: str) -> Tuple[ActionPanel, ...]:
    return tuple(panel for panel in PANELS if panel.view_id == view_id)
