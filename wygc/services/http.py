# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Outbound JSON requests — shared by every provider client.
Turns transport, status and payload failures into UpstreamRequestError.
"""

import time
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from wygc.core.errors import UpstreamRequestError
from wygc.core.logging import get_logger
from wygc.metrics.prometheus import UPSTREAM_LATENCY, UPSTREAM_REQUESTS

logger = get_logger(__name__)


async def send_json_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    response_type: Any,
    *,
    provider: str,
    operation: str,
    params: Optional[dict[str, str]] = None,
    headers: Optional[dict[str, str]] = None,
    data: Optional[dict[str, str]] = None,
    auth: Optional[tuple[str, str]] = None,
) -> Any:
    """
    Send a request and validate the JSON body against ``response_type``
    (a pydantic model or any type a TypeAdapter accepts).
    """
    logger.debug("Requesting %s %s params=%s", method, url, params)
    start = time.monotonic()
    outcome = "error"
    try:
        try:
            resp = await client.request(
                method, url, params=params, headers=headers, data=data, auth=auth
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamRequestError(
                url, f"provider answered with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamRequestError(url, f"{type(exc).__name__}: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise UpstreamRequestError(url, f"response is not valid JSON: {exc}") from exc

        try:
            result = TypeAdapter(response_type).validate_python(payload)
        except ValidationError as exc:
            raise UpstreamRequestError(
                url, f"unexpected response shape: {exc.error_count()} validation error(s)"
            ) from exc

        outcome = "success"
        return result
    finally:
        UPSTREAM_REQUESTS.labels(
            provider=provider, operation=operation, outcome=outcome
        ).inc()
        UPSTREAM_LATENCY.labels(provider=provider, operation=operation).observe(
            time.monotonic() - start
        )
