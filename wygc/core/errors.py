# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Error taxonomy — every failure the service can report to a caller.

Each exception carries the HTTP status it maps to and a stable ``error`` kind.
Upstream failures are chained with ``raise ... from exc``.
"""

# Nobody to call: neither success nor server fault
STATUS_NOTHING_TO_DO = 418


class WhosOnCallError(Exception):
    """Base class for all request-level failures."""

    status_code: int = 500
    error: str = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.error, "detail": self.message}


class InvalidScheduleIdentifierError(WhosOnCallError):
    status_code = 400
    error = "invalid_schedule_identifier"


class UpstreamRequestError(WhosOnCallError):
    """Transport failure, non-2xx status or unparseable payload from a provider."""

    error = "upstream_request_failed"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"request to [{url}] failed: {reason}")
        self.url = url
        self.reason = reason


# ── Roster / contact provider ──

class OpsGenieError(WhosOnCallError):
    """Failures while obtaining information from OpsGenie."""


class RequestScheduleError(OpsGenieError):
    error = "request_schedule_failed"

    def __init__(self, schedule_name: str, source: Exception) -> None:
        super().__init__(
            f"requesting schedule by name [{schedule_name}] failed: {source}"
        )
        self.schedule_name = schedule_name


class RequestOnCallPersonError(OpsGenieError):
    error = "request_oncall_person_failed"

    def __init__(self, schedule_id: str, source: Exception) -> None:
        super().__init__(
            f"requesting on call person for schedule [{schedule_id}] failed: {source}"
        )
        self.schedule_id = schedule_id


class RequestPhoneNumberError(OpsGenieError):
    error = "request_phone_number_failed"

    def __init__(self, username: str, source: Exception) -> None:
        super().__init__(f"requesting phone number failed for [{username}]: {source}")
        self.username = username


class ScheduleNotFoundError(OpsGenieError):
    status_code = 422
    error = "schedule_not_found"

    def __init__(self, schedule_name: str) -> None:
        super().__init__(
            f"OpsGenie doesn't have a schedule with the name [{schedule_name}]!"
        )
        self.schedule_name = schedule_name


class TooManySchedulesFoundError(OpsGenieError):
    status_code = 422
    error = "too_many_schedules_found"

    def __init__(self, schedule_name: str, schedules_found: int) -> None:
        super().__init__(
            f"Expected to find exactly one schedule for the name [{schedule_name}] "
            f"in OpsGenie, but got [{schedules_found}] instead!"
        )
        self.schedule_name = schedule_name
        self.schedules_found = schedules_found


class NoOnCallPersonError(OpsGenieError):
    status_code = STATUS_NOTHING_TO_DO
    error = "no_oncall_person"

    def __init__(self, schedule_id: str | None = None) -> None:
        if schedule_id:
            message = f"OpsGenie says no one is currently on call for schedule [{schedule_id}]!"
        else:
            message = "OpsGenie says no one is currently on call!"
        super().__init__(message)
        self.schedule_id = schedule_id


class NoPhoneNumberError(OpsGenieError):
    status_code = STATUS_NOTHING_TO_DO
    error = "no_phone_number"

    def __init__(self, username: str) -> None:
        super().__init__(f"User [{username}] has no phone number configured!")
        self.username = username


# ── Alert sender ──

class TwilioError(WhosOnCallError):
    """Failures while communicating with Twilio."""


class AlertSendError(TwilioError):
    error = "alert_send_failed"

    def __init__(self, phone_number: str, source: Exception) -> None:
        super().__init__(f"placing call to [{phone_number}] failed: {source}")
        self.phone_number = phone_number
