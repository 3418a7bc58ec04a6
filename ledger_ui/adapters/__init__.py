"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (HTTP transport and
    theme persistence) used by use cases and viewmodels.

Dependencies:
    ``http_client`` depends on ``requests``; ``theme_storage`` only needs a
    mutable mapping, such as NiceGUI's ``app.storage.user``.

Call context:
    Imported by ``ledger_ui/web_ui/runtime.py`` for runtime wiring and by tests
    for transport-level behavior verification.
"""
