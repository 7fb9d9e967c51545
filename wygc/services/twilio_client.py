# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Twilio client — rings the people on call.
Handles HTTP calls to the Twilio Calls API with the shared client's timeout.
"""

import httpx

from wygc.core.errors import AlertSendError, UpstreamRequestError
from wygc.core.logging import get_logger
from wygc.metrics.prometheus import ALERTS_SENT
from wygc.schemas import AlertResult, CallResult
from wygc.services.http import send_json_request

logger = get_logger(__name__)

PROVIDER = "twilio"


class TwilioClient:
    """Places one outbound voice call per phone number."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        account_sid: str,
        auth_token: str,
        from_number: str,
        twiml: str,
    ) -> None:
        self._client = http_client
        self._calls_url = (
            f"{base_url.rstrip('/')}/2010-04-01/Accounts/{account_sid}/Calls.json"
        )
        self._auth = (account_sid, auth_token)
        self._from_number = from_number
        self._twiml = twiml

    async def send_alert(self, phone_numbers: list[str]) -> AlertResult:
        """
        Call every number in order, ringing each distinct number once.
        The first failed call aborts the alert with AlertSendError.
        """
        calls: list[CallResult] = []
        for number in dict.fromkeys(phone_numbers):
            try:
                call = await send_json_request(
                    self._client, "POST", self._calls_url, CallResult,
                    provider=PROVIDER, operation="create_call",
                    data={"To": number, "From": self._from_number, "Twiml": self._twiml},
                    auth=self._auth,
                )
            except UpstreamRequestError as exc:
                ALERTS_SENT.labels(outcome="error").inc()
                raise AlertSendError(number, exc) from exc
            ALERTS_SENT.labels(outcome="success").inc()
            logger.info("Call placed: to=%s, sid=%s, status=%s", number, call.sid, call.status)
            calls.append(call)
        return AlertResult(calls=calls)
