from .settings import (
    Config,
    DevelopmentConfig,
    TestingConfig,
    validate_security_configuration,
)

__all__ = [
    "Config",
    "DevelopmentConfig",
    "TestingConfig",
    "validate_security_configuration",
]
