# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Who-is-on-call and alert endpoints.
Thin HTTP layer — delegates ALL logic to OnCallService / TwilioClient.
Errors propagate to the WhosOnCallError handler registered in main.py.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from wygc.core.dependencies import get_alert_sender, get_oncall_service
from wygc.core.logging import get_logger
from wygc.models.domain import AlertInfo, ScheduleIdentifier, parse_schedule_identifier
from wygc.schemas import AlertResult
from wygc.services.oncall_service import OnCallService
from wygc.services.twilio_client import TwilioClient

logger = get_logger(__name__)

router = APIRouter(tags=["On-Call"])


def schedule_identifier(
    id: Optional[str] = Query(default=None, description="OpsGenie schedule id"),
    name: Optional[str] = Query(default=None, description="OpsGenie schedule name"),
) -> ScheduleIdentifier:
    """Exactly one of ``id`` / ``name`` selects the schedule."""
    return parse_schedule_identifier({"id": id, "name": name})


@router.get("/whosoncall", response_model=AlertInfo)
async def get_person_on_call(
    requested_schedule: ScheduleIdentifier = Depends(schedule_identifier),
    service: OnCallService = Depends(get_oncall_service),
):
    """Look up who is currently on call for a schedule and how to reach them."""
    logger.info("Got request to look up on call persons for schedule %r", requested_schedule)
    return await service.resolve_on_call(requested_schedule)


@router.get("/alert", response_model=AlertResult)
async def alert_on_call(
    requested_alert: ScheduleIdentifier = Depends(schedule_identifier),
    service: OnCallService = Depends(get_oncall_service),
    alert_sender: TwilioClient = Depends(get_alert_sender),
):
    """Resolve the on-call roster for a schedule and ring everybody on it."""
    logger.info("Got alert request for schedule %r", requested_alert)
    people_to_alert = await service.resolve_on_call(requested_alert)

    numbers = people_to_alert.all_phone_numbers()
    logger.info("Will call these phones: %s", numbers)
    return await alert_sender.send_alert(numbers)
