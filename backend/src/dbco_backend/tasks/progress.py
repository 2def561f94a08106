"""Completion progress of questionnaire answers, each in the range 0...1."""

from __future__ import annotations

from typing import Any, Iterable

from ..classification import Risks, Success, classify
from .models import ContactDetails


def classification_progress(risks: Risks | None) -> float:
    """1 once the answers lead to a category, 0 while a risk is still unanswered."""

    if risks is None:
        return 0.0
    return 1.0 if isinstance(classify(risks), Success) else 0.0


def contact_details_progress(details: ContactDetails | None) -> float:
    """Share of first name, last name and a way to reach the contact that is filled in."""

    if details is None:
        return 0.0
    reachable = details.email if details.email is not None else details.phone_number
    values = [details.first_name, details.last_name, reachable]
    return sum(value is not None for value in values) / len(values)


def answer_progress(value: Any) -> float:
    if isinstance(value, Risks):
        return classification_progress(value)
    if isinstance(value, ContactDetails):
        return contact_details_progress(value)
    if isinstance(value, str):
        return 1.0 if value else 0.0
    # Dates and chosen answer options count once present.
    return 0.0 if value is None else 1.0


def questionnaire_progress(answers: Iterable[Any]) -> float:
    """Average progress over all answers; 0 for an empty questionnaire."""

    values = [answer_progress(answer) for answer in answers]
    if not values:
        return 0.0
    return sum(values) / len(values)


__all__ = [
    "answer_progress",
    "classification_progress",
    "contact_details_progress",
    "questionnaire_progress",
]
