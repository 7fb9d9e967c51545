# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: OpsGenie client — roster and contact lookups.
Thin wrapper over the three REST endpoints the resolvers need; every failure
surfaces as UpstreamRequestError and is annotated by the calling service.
"""

from urllib.parse import quote

import httpx

from wygc.models.domain import ContactInformationResult, OnCallResult, Schedule
from wygc.services.http import send_json_request

PROVIDER = "opsgenie"


class OpsGenieClient:
    """Read-only access to OpsGenie schedules, on-call rosters and users."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str, api_key: str) -> None:
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._headers = {"Authorization": f"GenieKey {api_key}"}

    def _url(self, *segments: str) -> str:
        return "/".join([self._base_url, *(quote(s, safe="") for s in segments)])

    async def search_schedules(self, query: str) -> list[Schedule]:
        return await send_json_request(
            self._client, "GET", self._url("schedules"), list[Schedule],
            provider=PROVIDER, operation="search_schedules",
            params={"query": query}, headers=self._headers,
        )

    async def get_on_call_recipients(self, schedule_id: str) -> list[str]:
        result: OnCallResult = await send_json_request(
            self._client, "GET", self._url("schedules", schedule_id, "on-calls"), OnCallResult,
            provider=PROVIDER, operation="get_on_calls",
            params={"flat": "true"}, headers=self._headers,
        )
        return result.data.on_call_recipients

    async def get_user_contacts(self, username: str) -> ContactInformationResult:
        return await send_json_request(
            self._client, "GET", self._url("users", username), ContactInformationResult,
            provider=PROVIDER, operation="get_user",
            params={"expand": "contact"}, headers=self._headers,
        )
