# scoring.py - deterministic risk score for a validated application
from dataclasses import dataclass
from typing import Iterable

from schemas import Application

SKIING_RISK = 50
SWIMMING_RISK = -20
AUSTRALIA_RISK = 45
APPROVAL_THRESHOLD = 40


@dataclass(frozen=True)
class RiskAssessment:
    score: int
    is_approved: bool


def _contains(values: Iterable[str], wanted: str) -> bool:
    return any(value.casefold() == wanted for value in values)


def score_application(application: Application) -> RiskAssessment:
    """Sum the independent rule contributions; lower is safer."""
    interests = application.interests or ()
    addresses = application.home_addresses or ()
    score = 0

    if _contains(interests, "skiing"):
        score += SKIING_RISK

    # swimming is healthy, so risk goes down
    if _contains(interests, "swimming"):
        score += SWIMMING_RISK

    if any(a.is_current and (a.country or "").casefold() == "australia" for a in addresses):
        score += AUSTRALIA_RISK

    return RiskAssessment(score=score, is_approved=score < APPROVAL_THRESHOLD)
