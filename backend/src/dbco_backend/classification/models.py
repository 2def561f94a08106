"""Value types shared by the exposure risk classifier and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class Distance(str, Enum):
    """Whether the contact was within 1.5 metres of the index, and for how long."""

    YES_MORE_THAN_15_MIN = "yesMoreThan15min"
    YES_LESS_THAN_15_MIN = "yesLessThan15min"
    NO = "no"


class Category(str, Enum):
    """Contact tracing categories, in priority order."""

    CATEGORY_1 = "1"  # Same household
    CATEGORY_2A = "2a"  # Close contact, longer than 15 minutes
    CATEGORY_2B = "2b"  # Close contact, shorter, with physical contact
    CATEGORY_3A = "3a"
    CATEGORY_3B = "3b"
    OTHER = "other"


class Risk(str, Enum):
    """Identifiers of the risk questions asked during classification."""

    SAME_HOUSEHOLD = "sameHousehold"
    DISTANCE = "distance"
    PHYSICAL_CONTACT = "physicalContact"
    SAME_ROOM = "sameRoom"


@dataclass(frozen=True, slots=True)
class Risks:
    """Answers collected so far. ``None`` means the question is unanswered."""

    same_household: bool | None = None
    distance: Distance | None = None
    physical_contact: bool | None = None
    same_room: bool | None = None


@dataclass(frozen=True, slots=True)
class Success:
    """A definitive category was reached."""

    category: Category


@dataclass(frozen=True, slots=True)
class NeedsAssessment:
    """Classification is blocked on an unanswered risk question."""

    risk: Risk

    @property
    def category(self) -> None:
        return None


ClassificationResult = Union[Success, NeedsAssessment]


@dataclass(frozen=True, slots=True)
class Assessment:
    """Result of a classification together with the risks it consulted."""

    result: ClassificationResult
    visible_risks: List[Risk]


__all__ = [
    "Assessment",
    "Category",
    "ClassificationResult",
    "Distance",
    "NeedsAssessment",
    "Risk",
    "Risks",
    "Success",
]
