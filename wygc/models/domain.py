# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wygc.core.errors import InvalidScheduleIdentifierError


class CamelModel(BaseModel):
    """Serialises to camelCase, accepts both snake_case and camelCase input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Schedule identifier ──

class ScheduleById(CamelModel):
    id: str = Field(..., min_length=1)


class ScheduleByName(CamelModel):
    name: str = Field(..., min_length=1)


ScheduleIdentifier = Union[ScheduleById, ScheduleByName]


def parse_schedule_identifier(params: Mapping[str, Optional[str]]) -> ScheduleIdentifier:
    """
    Build a ScheduleIdentifier from untagged input such as query parameters.
    Exactly one of ``id`` / ``name`` must be given; blank values count as absent.
    Present values are passed on unchanged.
    """
    schedule_id = params.get("id") or ""
    name = params.get("name") or ""
    has_id, has_name = bool(schedule_id.strip()), bool(name.strip())
    if has_id and has_name:
        raise InvalidScheduleIdentifierError(
            "Specify a schedule either by [id] or by [name], not both"
        )
    if has_id:
        return ScheduleById(id=schedule_id)
    if has_name:
        return ScheduleByName(name=name)
    raise InvalidScheduleIdentifierError(
        "A schedule must be specified with either the [id] or the [name] parameter"
    )


# ── OpsGenie payloads ──

class Schedule(CamelModel):
    id: str


class OnCallResultData(CamelModel):
    on_call_recipients: list[str]


class OnCallResult(CamelModel):
    data: OnCallResultData


class UserContact(CamelModel):
    to: str
    id: str
    contact_method: str
    enabled: bool


class ContactInformationResultData(CamelModel):
    id: str
    username: str
    full_name: str
    user_contacts: list[UserContact]


class ContactInformationResult(CamelModel):
    data: ContactInformationResultData


# ── Resolution results ──

class UserPhoneNumber(CamelModel):
    """A person on call and their deduplicated, sorted phone numbers."""
    name: str
    phone: list[str]


class AlertInfo(CamelModel):
    """The primary on-call contact plus everybody currently on call."""
    username: str
    phone_number: str
    full_information: list[UserPhoneNumber]

    def all_phone_numbers(self) -> list[str]:
        """Every number of every person, in roster order."""
        return [number for person in self.full_information for number in person.phone]
