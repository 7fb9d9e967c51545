# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os
from typing import Any, Mapping, Optional

ENV_PREFIX = "WYGC_"

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}

DEFAULT_TWIML = (
    "<Response><Say>You are on call and an alert has been raised. "
    "Please check your incident channel.</Say></Response>"
)


class ConfigError(Exception):
    """Raised when the environment does not describe a usable configuration."""


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got [{raw}]")


def _parse_number(name: str, raw: str, kind: type) -> Any:
    try:
        return kind(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a {kind.__name__}, got [{raw}]") from None


class Settings:
    """Application settings loaded from environment variables."""

    SECRET_FIELDS: tuple[str, ...] = ("OPSGENIE_API_KEY", "TWILIO_AUTH_TOKEN")
    REQUIRED_FIELDS: tuple[str, ...] = (
        "OPSGENIE_BASE_URL",
        "OPSGENIE_API_KEY",
        "TWILIO_BASE_URL",
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_FROM_NUMBER",
    )

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        env = os.environ if environ is None else environ

        def get(name: str, default: str = "") -> str:
            return env.get(f"{ENV_PREFIX}{name}", default)

        self.SERVICE_NAME: str = get("SERVICE_NAME", "who-you-gonna-call")
        self.SERVICE_VERSION: str = get("SERVICE_VERSION", "0.1.0")
        self.BIND_ADDRESS: str = get("BIND_ADDRESS", "0.0.0.0")
        self.BIND_PORT: int = _parse_number(
            f"{ENV_PREFIX}BIND_PORT", get("BIND_PORT", "8080"), int
        )
        self.LOG_LEVEL: str = get("LOG_LEVEL", "INFO").upper()
        self.HTTP_TIMEOUT: float = _parse_number(
            f"{ENV_PREFIX}HTTP_TIMEOUT", get("HTTP_TIMEOUT", "5.0"), float
        )

        # ── Roster / contact provider ──
        self.OPSGENIE_BASE_URL: str = get(
            "OPSGENIE_BASE_URL", "https://api.opsgenie.com/v2/"
        )
        self.OPSGENIE_API_KEY: str = get("OPSGENIE_API_KEY")
        self.SKIP_DISABLED_CONTACTS: bool = _parse_bool(
            f"{ENV_PREFIX}SKIP_DISABLED_CONTACTS", get("SKIP_DISABLED_CONTACTS", "false")
        )

        # ── Alert sender ──
        self.TWILIO_BASE_URL: str = get("TWILIO_BASE_URL", "https://api.twilio.com")
        self.TWILIO_ACCOUNT_SID: str = get("TWILIO_ACCOUNT_SID")
        self.TWILIO_AUTH_TOKEN: str = get("TWILIO_AUTH_TOKEN")
        self.TWILIO_FROM_NUMBER: str = get("TWILIO_FROM_NUMBER")
        self.TWILIO_TWIML: str = get("TWILIO_TWIML", DEFAULT_TWIML)

    def validate(self) -> None:
        """Raise ConfigError naming every required variable that is unset."""
        missing = [
            f"{ENV_PREFIX}{field}"
            for field in self.REQUIRED_FIELDS
            if not getattr(self, field).strip()
        ]
        if missing:
            raise ConfigError(
                "Missing required configuration: " + ", ".join(missing)
            )
        if self.HTTP_TIMEOUT <= 0:
            raise ConfigError(f"{ENV_PREFIX}HTTP_TIMEOUT must be positive")

    def describe(self) -> dict[str, Any]:
        """All settings as a dict with secrets masked, safe to log."""
        described: dict[str, Any] = {}
        for key, value in vars(self).items():
            if key in self.SECRET_FIELDS:
                value = "***" if value else ""
            described[key] = value
        return described

    def __repr__(self) -> str:
        return f"Settings({self.describe()!r})"


settings = Settings()
