"""Storefront settings read from the environment.

Persistence and event processing are configured through ``domain.toml``;
the values here cover what the shop itself needs to know.
"""

import os
from dataclasses import dataclass


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for key in keys:
        value = os.getenv(key)
        if value is not None and value.strip() != "":
            return value.strip()
    return default


@dataclass(frozen=True)
class Settings:
    currency: str
    sign_in_path: str
    default_payment_method: str


def load_settings() -> Settings:
    return Settings(
        currency=_get_env("STOREFRONT_CURRENCY", "CURRENCY", default="KES"),
        sign_in_path=_get_env("STOREFRONT_SIGN_IN_PATH", default="/auth"),
        default_payment_method=_get_env("STOREFRONT_PAYMENT_METHOD", default="credit-card"),
    )


settings = load_settings()
