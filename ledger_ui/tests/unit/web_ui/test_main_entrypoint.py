from __future__ import annotations

import logging
import sys

import pytest

from ledger_ui.web_ui import main as web_main
from ledger_ui.web_ui.widgets import ResultPanel


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_smoke_run_logs_effective_level(monkeypatch, caplog, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["ledger-ui", "--smoke-test"])
    monkeypatch.setenv("LEDGER_UI_LOG_LEVEL", "info")
    monkeypatch.delenv("LEDGER_UI_DEBUG", raising=False)
    caplog.set_level(logging.INFO, logger=web_main.__name__)

    web_main.main()

    assert "Log level INFO" in caplog.text
    assert "web-smoke-ok" in capsys.readouterr().out


def test_result_panel_keeps_only_its_container() -> None:
    container = object()

    panel = ResultPanel(container)  # type: ignore[arg-type]

    assert vars(panel) == {"container": container}
