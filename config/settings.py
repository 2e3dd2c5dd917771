import os


def _read_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _read_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        parsed = int(raw)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _is_secret_weak(secret: str) -> bool:
    normalized = secret.strip().lower()
    return normalized in {"", "dev", "super-secret-key", "changeme"} or len(secret) < 32


def _runtime_environment_name() -> str:
    for env_name in ("FINANCE_CONTROL_ENV", "APP_ENV", "FLASK_ENV"):
        raw = os.getenv(env_name)
        if raw is not None and raw.strip():
            return raw.strip().lower()
    return ""


def _database_uri() -> str:
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url
    return (
        f"postgresql://{os.getenv('DB_USER')}:{os.getenv('DB_PASS')}@"
        f"{os.getenv('DB_HOST')}:{os.getenv('DB_PORT')}/{os.getenv('DB_NAME')}"
    )


def validate_security_configuration() -> None:
    enforce = _read_bool_env("SECURITY_ENFORCE_STRONG_SECRETS", True)

    is_debug = _read_bool_env("FLASK_DEBUG", False)
    is_testing = _read_bool_env("FLASK_TESTING", False)
    runtime_environment = _runtime_environment_name()
    secure_runtime = not is_debug and not is_testing

    if not enforce:
        if secure_runtime:
            raise RuntimeError(
                "Invalid runtime configuration: SECURITY_ENFORCE_STRONG_SECRETS "
                "must be true when FLASK_DEBUG=false and FLASK_TESTING=false."
            )
        return

    if runtime_environment in {"prod", "production"} and is_debug:
        raise RuntimeError(
            "Invalid runtime configuration: FLASK_DEBUG must be false in production."
        )

    if is_testing or is_debug:
        return

    weak = []
    if _is_secret_weak(os.getenv("SECRET_KEY", "dev")):
        weak.append("SECRET_KEY")
    if _is_secret_weak(os.getenv("JWT_SECRET_KEY", "super-secret-key")):
        weak.append("JWT_SECRET_KEY")

    if weak:
        raise RuntimeError(
            "Weak/invalid secrets for production runtime: "
            + ", ".join(weak)
            + ". Configure strong values in environment variables."
        )


class Config:
    """Runtime settings resolved from the environment.

    Values are read when the class is instantiated so that a process can
    change its environment (tests do) before building an application.
    """

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_TYPE = "Bearer"

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("SECRET_KEY", "dev")
        self.JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "super-secret-key")
        self.DEBUG = _read_bool_env("FLASK_DEBUG", False)
        self.TESTING = _read_bool_env("FLASK_TESTING", False)
        self.SQLALCHEMY_DATABASE_URI = _database_uri()
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        self.DEFAULT_PAGE_SIZE = _read_int_env("DEFAULT_PAGE_SIZE", 20)
        self.MAX_PAGE_SIZE = _read_int_env("MAX_PAGE_SIZE", 100)
        self.AUTO_CREATE_DB = _read_bool_env(
            "AUTO_CREATE_DB", self.DEBUG or self.TESTING
        )


class DevelopmentConfig(Config):
    def __init__(self) -> None:
        super().__init__()
        self.DEBUG = True
        self.AUTO_CREATE_DB = True


class TestingConfig(Config):
    def __init__(self) -> None:
        super().__init__()
        self.TESTING = True
        self.AUTO_CREATE_DB = True
        self.SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite://")
