# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Contact resolution — a username's dialable phone numbers.
"""

from wygc.core.errors import RequestPhoneNumberError, UpstreamRequestError
from wygc.core.logging import get_logger
from wygc.models.domain import UserContact
from wygc.services.opsgenie_client import OpsGenieClient
from wygc.services.phone import format_phone_number

logger = get_logger(__name__)

PHONE_CONTACT_METHODS: frozenset[str] = frozenset({"voice", "sms"})


def extract_phone_numbers(
    contacts: list[UserContact],
    skip_disabled: bool = False,
) -> list[str]:
    """
    Normalised voice/sms destinations, sorted and without duplicates.
    Pure function — no I/O, no metrics, no logging.
    """
    numbers = {
        format_phone_number(contact.to)
        for contact in contacts
        if contact.contact_method in PHONE_CONTACT_METHODS
        and (contact.enabled or not skip_disabled)
    }
    return sorted(numbers)


class ContactService:
    """Looks up a user's contact methods and reduces them to phone numbers."""

    def __init__(self, opsgenie: OpsGenieClient, skip_disabled: bool = False) -> None:
        self._opsgenie = opsgenie
        self._skip_disabled = skip_disabled

    async def resolve_phone_numbers(self, username: str) -> list[str]:
        """
        Return the user's phone numbers; an empty list when none are configured.
        Raises RequestPhoneNumberError if OpsGenie cannot be queried.
        """
        logger.debug("Looking up phone number for [%s]", username)
        try:
            contact_information = await self._opsgenie.get_user_contacts(username)
        except UpstreamRequestError as exc:
            raise RequestPhoneNumberError(username, exc) from exc

        numbers = extract_phone_numbers(
            contact_information.data.user_contacts, self._skip_disabled
        )
        logger.debug("Found %d phone number(s) for [%s]", len(numbers), username)
        return numbers
