# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: On-call resolution.
Business logic for determining who is currently on call and how to reach them.

Pipeline: schedule identifier → schedule id → on-call usernames →
per-user phone numbers → AlertInfo. Every step is all-or-nothing; there is
no retry, fallback or partial result.
"""

import asyncio

from wygc.core.errors import (
    NoOnCallPersonError,
    NoPhoneNumberError,
    RequestOnCallPersonError,
    UpstreamRequestError,
    WhosOnCallError,
)
from wygc.core.logging import get_logger
from wygc.metrics.prometheus import ONCALL_LOOKUPS
from wygc.models.domain import (
    AlertInfo,
    ScheduleById,
    ScheduleIdentifier,
    UserPhoneNumber,
)
from wygc.services.contact_service import ContactService
from wygc.services.opsgenie_client import OpsGenieClient
from wygc.services.schedule_service import ScheduleService

logger = get_logger(__name__)


async def gather_all_or_nothing(*coros):
    """
    Run coroutines concurrently and return their results in argument order.
    The first failure cancels the remaining tasks, waits for them to unwind,
    then propagates.
    """
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class OnCallService:
    """Resolves a schedule to the people on call and their phone numbers."""

    def __init__(
        self,
        opsgenie: OpsGenieClient,
        schedule_service: ScheduleService,
        contact_service: ContactService,
    ) -> None:
        self._opsgenie = opsgenie
        self._schedules = schedule_service
        self._contacts = contact_service

    async def resolve_on_call(self, identifier: ScheduleIdentifier) -> AlertInfo:
        identifier_type = "id" if isinstance(identifier, ScheduleById) else "name"
        try:
            alert_info = await self._resolve(identifier)
        except WhosOnCallError as exc:
            ONCALL_LOOKUPS.labels(identifier_type=identifier_type, outcome=exc.error).inc()
            raise
        ONCALL_LOOKUPS.labels(identifier_type=identifier_type, outcome="success").inc()
        return alert_info

    async def _resolve(self, identifier: ScheduleIdentifier) -> AlertInfo:
        if isinstance(identifier, ScheduleById):
            schedule_id = identifier.id
        else:
            schedule_id = await self._schedules.resolve_schedule_id(identifier.name)

        try:
            recipients = await self._opsgenie.get_on_call_recipients(schedule_id)
        except UpstreamRequestError as exc:
            raise RequestOnCallPersonError(schedule_id, exc) from exc

        if not recipients:
            raise NoOnCallPersonError(schedule_id)
        logger.debug("On call for schedule [%s]: %s", schedule_id, recipients)

        phone_numbers = await gather_all_or_nothing(
            *(self._contacts.resolve_phone_numbers(user) for user in recipients)
        )
        full_information = [
            UserPhoneNumber(name=user, phone=phones)
            for user, phones in zip(recipients, phone_numbers)
        ]

        if not full_information:
            raise NoOnCallPersonError(schedule_id)
        primary = full_information[0]
        if not primary.phone:
            raise NoPhoneNumberError(primary.name)

        return AlertInfo(
            username=primary.name,
            phone_number=primary.phone[0],
            full_information=full_information,
        )
