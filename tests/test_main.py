"""Tests for the app entrypoint."""

from __future__ import annotations

import pytest

from health_tracker import __main__ as entry


def test_main_returns_app_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(entry, "run_app", lambda: 0)
    assert entry.main() == 0


def test_main_reports_missing_kivy(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def _run_app() -> int:
        raise ImportError("No module named 'kivy'")

    monkeypatch.setattr(entry, "run_app", _run_app)
    assert entry.main() == 1
    out = capsys.readouterr().out
    assert "No se pudo iniciar Kivy" in out
    assert "pip install kivy" in out
