from __future__ import annotations

from finance_control import create_app
from finance_control.extensions.database import db


def _test_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("FLASK_DEBUG", "false")
    monkeypatch.setenv("FLASK_TESTING", "true")
    monkeypatch.setenv("SECURITY_ENFORCE_STRONG_SECRETS", "false")


def test_create_app_skips_create_all_when_disabled(monkeypatch) -> None:
    _test_environment(monkeypatch)
    monkeypatch.setenv("AUTO_CREATE_DB", "false")

    calls = {"count": 0}

    def _fake_create_all() -> None:
        calls["count"] += 1

    monkeypatch.setattr(db, "create_all", _fake_create_all)

    create_app()

    assert calls["count"] == 0


def test_create_app_auto_create_db_runs_when_explicitly_enabled(monkeypatch) -> None:
    _test_environment(monkeypatch)
    monkeypatch.setenv("AUTO_CREATE_DB", "true")

    calls = {"count": 0}

    def _fake_create_all() -> None:
        calls["count"] += 1

    monkeypatch.setattr(db, "create_all", _fake_create_all)

    create_app()

    assert calls["count"] == 1


def test_create_app_accepts_mapping_overrides(monkeypatch) -> None:
    _test_environment(monkeypatch)
    monkeypatch.setenv("AUTO_CREATE_DB", "false")

    app = create_app({"MAX_PAGE_SIZE": 5})

    assert app.config["MAX_PAGE_SIZE"] == 5
    assert app.config["TESTING"] is True
