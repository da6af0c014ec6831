# validator.py - required element checks, first failure wins
from datetime import date
from typing import Optional

from errors import InvalidRequest, MissingElement
from schemas import Application


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_application(application: Application) -> None:
    """Raise the first violated rule, checked in a fixed order.

    FirstName, LastName and DateOfBirth must be present (names non-blank).
    Interests must be supplied and hold at least one entry; an absent list
    and an empty list are reported differently.
    """
    if _is_blank(application.first_name):
        raise MissingElement("FirstName")

    if _is_blank(application.last_name):
        raise MissingElement("LastName")

    # date.min is what .NET clients send for an unset DateTime
    if application.date_of_birth is None or application.date_of_birth == date.min:
        raise MissingElement("DateOfBirth")

    # not supplied at all, not even an empty array
    if application.interests is None:
        raise MissingElement("Interests")

    if not application.interests:
        raise InvalidRequest("At least one interest must be supplied")
