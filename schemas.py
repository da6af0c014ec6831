from datetime import date
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Camel-case JSON model that binds incoming keys regardless of case.

    ``FirstName``, ``firstName`` and ``firstname`` all land on ``first_name``.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def match_keys_ignoring_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            aliases[alias.lower()] = alias
            aliases[name.lower()] = alias
        return {aliases.get(str(key).lower(), key): value for key, value in data.items()}


def _date_part(value: Any) -> Any:
    # "1990-05-01T00:00:00" -> "1990-05-01"
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value


class Address(CamelModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    line3: Optional[str] = None
    postcode: Optional[str] = None
    region: Optional[str] = None  # state, province, territory
    country: Optional[str] = None
    lived_from: Optional[date] = None
    lived_to: Optional[date] = None

    @field_validator("lived_from", "lived_to", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)

    @property
    def is_current(self) -> bool:
        return self.lived_to is None


class Application(CamelModel):
    """An insurance application as received; None means the element was never supplied."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    interests: Optional[Tuple[str, ...]] = None
    current_occupations: Optional[Tuple[str, ...]] = None
    home_addresses: Optional[Tuple[Address, ...]] = None
    preferred_language: Optional[str] = None

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)


class Decision(CamelModel):
    is_approved: bool
    outcome_description: Optional[str] = None


class ErrorResponse(CamelModel):
    error_message: str
    element_name: Optional[str] = None
