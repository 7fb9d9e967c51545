# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Schedule resolution — turns a schedule name into its OpsGenie id.
"""

from wygc.core.errors import (
    RequestScheduleError,
    ScheduleNotFoundError,
    TooManySchedulesFoundError,
    UpstreamRequestError,
)
from wygc.core.logging import get_logger
from wygc.services.opsgenie_client import OpsGenieClient

logger = get_logger(__name__)


class ScheduleService:
    """Name → id lookup that refuses to guess between ambiguous matches."""

    def __init__(self, opsgenie: OpsGenieClient) -> None:
        self._opsgenie = opsgenie

    async def resolve_schedule_id(self, schedule_name: str) -> str:
        """
        Return the id of the single schedule matching ``schedule_name``.
        Raises ScheduleNotFoundError / TooManySchedulesFoundError unless
        exactly one schedule matches, RequestScheduleError on upstream failure.
        """
        try:
            schedules = await self._opsgenie.search_schedules(schedule_name)
        except UpstreamRequestError as exc:
            raise RequestScheduleError(schedule_name, exc) from exc

        if not schedules:
            raise ScheduleNotFoundError(schedule_name)
        if len(schedules) > 1:
            raise TooManySchedulesFoundError(schedule_name, len(schedules))

        schedule_id = schedules[0].id
        logger.debug("Schedule [%s] resolved to id [%s]", schedule_name, schedule_id)
        return schedule_id
