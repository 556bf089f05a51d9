from __future__ import annotations

import os
from dataclasses import dataclass

VALID_APP_ENVS = {"local", "dev", "stg", "prod"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}
VALID_AMOUNT_GROUPINGS = {"indian", "western"}


@dataclass(frozen=True)
class Settings:
    app_name: str = "homeloan-eligibility-engine"
    app_env: str = "local"
    app_version: str = "0.1.0"
    git_sha: str = "unknown"
    build_time: str = "unknown"
    log_level: str = "INFO"
    currency_symbol: str = "₹"
    amount_grouping: str = "indian"
    metrics_enabled: bool = True


_settings: Settings | None = None


def _validate_settings(settings: Settings) -> None:
    if settings.app_env not in VALID_APP_ENVS:
        allowed = ", ".join(sorted(VALID_APP_ENVS))
        raise ValueError(
            f"Invalid APP_ENV '{settings.app_env}'. Expected one of: {allowed}."
        )

    if not settings.app_name.strip():
        raise ValueError("APP_NAME must be set and non-empty.")

    if settings.log_level not in VALID_LOG_LEVELS:
        allowed = ", ".join(sorted(VALID_LOG_LEVELS))
        raise ValueError(f"LOG_LEVEL must be one of: {allowed}.")

    if not settings.currency_symbol.strip():
        raise ValueError("CURRENCY_SYMBOL must be set and non-empty.")

    if settings.amount_grouping not in VALID_AMOUNT_GROUPINGS:
        raise ValueError("AMOUNT_GROUPING must be one of: indian, western.")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def get_settings() -> Settings:
    global _settings

    if _settings is None:
        candidate = Settings(
            app_name=os.getenv("APP_NAME", "homeloan-eligibility-engine"),
            app_env=os.getenv("APP_ENV", "local"),
            app_version=os.getenv("APP_VERSION", "0.1.0"),
            git_sha=os.getenv("GIT_SHA", "unknown"),
            build_time=os.getenv("BUILD_TIME", "unknown"),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            currency_symbol=os.getenv("CURRENCY_SYMBOL", "₹"),
            amount_grouping=os.getenv("AMOUNT_GROUPING", "indian").strip().lower(),
            metrics_enabled=_env_bool("METRICS_ENABLED", True),
        )
        _validate_settings(candidate)
        _settings = candidate

    return _settings


def clear_settings_cache() -> None:
    global _settings
    _settings = None
