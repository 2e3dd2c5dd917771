from __future__ import annotations

import pytest

import config as config_module
from config import Config, validate_security_configuration


def test_config_debug_defaults_to_false_when_env_missing(monkeypatch) -> None:
    monkeypatch.delenv("FLASK_DEBUG", raising=False)
    assert Config().DEBUG is False


def test_config_reads_paging_and_log_settings(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "15")
    monkeypatch.setenv("MAX_PAGE_SIZE", "not-a-number")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config()

    assert config.DEFAULT_PAGE_SIZE == 15
    assert config.MAX_PAGE_SIZE == 100
    assert config.LOG_LEVEL == "DEBUG"


def test_auto_create_db_follows_testing_flag(monkeypatch) -> None:
    monkeypatch.delenv("AUTO_CREATE_DB", raising=False)
    monkeypatch.setenv("FLASK_DEBUG", "false")
    monkeypatch.setenv("FLASK_TESTING", "false")
    assert Config().AUTO_CREATE_DB is False

    monkeypatch.setenv("FLASK_TESTING", "true")
    assert Config().AUTO_CREATE_DB is True

    monkeypatch.setenv("AUTO_CREATE_DB", "false")
    assert Config().AUTO_CREATE_DB is False


def test_testing_config_defaults_to_in_memory_database(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    config = config_module.TestingConfig()

    assert config.TESTING is True
    assert config.SQLALCHEMY_DATABASE_URI == "sqlite://"


def test_validate_security_configuration_rejects_debug_in_production(
    monkeypatch,
) -> None:
    monkeypatch.setenv("SECURITY_ENFORCE_STRONG_SECRETS", "true")
    monkeypatch.setenv("FINANCE_CONTROL_ENV", "production")
    monkeypatch.setenv("FLASK_DEBUG", "true")
    monkeypatch.setenv("FLASK_TESTING", "false")

    with pytest.raises(RuntimeError) as exc_info:
        validate_security_configuration()

    assert "FLASK_DEBUG must be false in production" in str(exc_info.value)


def test_validate_security_configuration_allows_debug_outside_production(
    monkeypatch,
) -> None:
    monkeypatch.setenv("SECURITY_ENFORCE_STRONG_SECRETS", "true")
    monkeypatch.setenv("FINANCE_CONTROL_ENV", "dev")
    monkeypatch.setenv("FLASK_DEBUG", "true")
    monkeypatch.setenv("FLASK_TESTING", "false")

    validate_security_configuration()


def test_validate_security_configuration_rejects_weak_secrets_in_secure_runtime(
    monkeypatch,
) -> None:
    monkeypatch.setenv("SECURITY_ENFORCE_STRONG_SECRETS", "true")
    monkeypatch.setenv("FINANCE_CONTROL_ENV", "production")
    monkeypatch.setenv("FLASK_DEBUG", "false")
    monkeypatch.setenv("FLASK_TESTING", "false")
    monkeypatch.setenv("SECRET_KEY", "dev")
    monkeypatch.setenv("JWT_SECRET_KEY", "super-secret-key")

    with pytest.raises(RuntimeError) as exc_info:
        validate_security_configuration()

    assert "SECRET_KEY" in str(exc_info.value)
    assert "JWT_SECRET_KEY" in str(exc_info.value)


def test_validate_security_configuration_accepts_strong_secrets(monkeypatch) -> None:
    monkeypatch.setenv("SECURITY_ENFORCE_STRONG_SECRETS", "true")
    monkeypatch.setenv("FINANCE_CONTROL_ENV", "production")
    monkeypatch.setenv("FLASK_DEBUG", "false")
    monkeypatch.setenv("FLASK_TESTING", "false")
    monkeypatch.setenv("SECRET_KEY", "s" * 40)
    monkeypatch.setenv("JWT_SECRET_KEY", "j" * 40)

    validate_security_configuration()


def test_disabling_secret_enforcement_requires_non_production_runtime(
    monkeypatch,
) -> None:
    monkeypatch.setenv("SECURITY_ENFORCE_STRONG_SECRETS", "false")
    monkeypatch.setenv("FLASK_DEBUG", "false")
    monkeypatch.setenv("FLASK_TESTING", "false")

    with pytest.raises(RuntimeError):
        validate_security_configuration()
