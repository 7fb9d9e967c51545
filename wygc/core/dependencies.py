# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — shared HTTP client and service singletons.
"""

import httpx

from wygc.core.config import Settings, settings
from wygc.services.contact_service import ContactService
from wygc.services.oncall_service import OnCallService
from wygc.services.opsgenie_client import OpsGenieClient
from wygc.services.schedule_service import ScheduleService
from wygc.services.twilio_client import TwilioClient

_http_client: httpx.AsyncClient | None = None
_oncall_service: OnCallService | None = None
_twilio_client: TwilioClient | None = None


def build_oncall_service(http_client: httpx.AsyncClient, config: Settings) -> OnCallService:
    opsgenie = OpsGenieClient(http_client, config.OPSGENIE_BASE_URL, config.OPSGENIE_API_KEY)
    return OnCallService(
        opsgenie=opsgenie,
        schedule_service=ScheduleService(opsgenie),
        contact_service=ContactService(opsgenie, skip_disabled=config.SKIP_DISABLED_CONTACTS),
    )


def build_twilio_client(http_client: httpx.AsyncClient, config: Settings) -> TwilioClient:
    return TwilioClient(
        http_client,
        base_url=config.TWILIO_BASE_URL,
        account_sid=config.TWILIO_ACCOUNT_SID,
        auth_token=config.TWILIO_AUTH_TOKEN,
        from_number=config.TWILIO_FROM_NUMBER,
        twiml=config.TWILIO_TWIML,
    )


def init_http_client(config: Settings = settings) -> None:
    global _http_client, _oncall_service, _twilio_client
    _http_client = httpx.AsyncClient(timeout=config.HTTP_TIMEOUT)
    _oncall_service = build_oncall_service(_http_client, config)
    _twilio_client = build_twilio_client(_http_client, config)


async def close_http_client() -> None:
    global _http_client, _oncall_service, _twilio_client
    if _http_client:
        await _http_client.aclose()
    _http_client = None
    _oncall_service = None
    _twilio_client = None


# ── FastAPI dependency functions ──
def get_oncall_service() -> OnCallService:
    assert _oncall_service is not None, "HTTP client not initialised"
    return _oncall_service


def get_alert_sender() -> TwilioClient:
    assert _twilio_client is not None, "HTTP client not initialised"
    return _twilio_client
