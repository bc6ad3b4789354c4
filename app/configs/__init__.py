from app.configs.settings import (
    CONFIG_MAP,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    LimiterConfig,
    PasswordConfig,
    pool_kwargs,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "LimiterConfig",
    "PasswordConfig",
    "pool_kwargs",
    "settings",
]
