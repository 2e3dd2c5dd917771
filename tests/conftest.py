import os
import sys
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Flask.config.from_prefixed_env parses FLASK_* values as JSON.
TEST_ENV_OVERRIDES = {
    "SECRET_KEY": "test-secret",
    "JWT_SECRET_KEY": "test-jwt-secret-with-enough-length-0123",
    "FLASK_DEBUG": "false",
    "FLASK_TESTING": "true",
    "SECURITY_ENFORCE_STRONG_SECRETS": "false",
    "LOG_LEVEL": "WARNING",
}


@pytest.fixture(autouse=True)
def isolate_test_env() -> Generator[None, None, None]:
    tracked_keys = set(TEST_ENV_OVERRIDES.keys()) | {
        "DATABASE_URL",
        "AUTO_CREATE_DB",
        "DEFAULT_PAGE_SIZE",
        "MAX_PAGE_SIZE",
    }
    original_values = {key: os.environ.get(key) for key in tracked_keys}
    yield
    for key, value in original_values.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


@pytest.fixture
def app(tmp_path: Path):
    test_db_path = tmp_path / "test.sqlite3"
    os.environ["DATABASE_URL"] = f"sqlite:///{test_db_path}"
    for key, value in TEST_ENV_OVERRIDES.items():
        os.environ[key] = value

    from finance_control import create_app
    from finance_control.extensions.database import db

    app = create_app()
    app.config["TESTING"] = True

    with app.app_context():
        db.drop_all()
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()
    if test_db_path.exists():
        test_db_path.unlink()


@pytest.fixture
def client(app) -> Generator:
    yield app.test_client()


@pytest.fixture
def token_for(app) -> Callable[[int], str]:
    from flask_jwt_extended import create_access_token

    def _token(user_id: int) -> str:
        with app.app_context():
            return create_access_token(identity=str(user_id))

    return _token


@pytest.fixture
def auth_headers(token_for) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token_for(1)}"}


@pytest.fixture
def other_user_headers(token_for) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token_for(2)}"}
