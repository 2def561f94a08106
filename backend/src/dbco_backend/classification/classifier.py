"""Exposure risk classification for contacts of an index patient.

The classifier walks a fixed chain of risk questions. Each step either yields
a definitive :class:`Category`, reports that its own question is still
unanswered, or hands over to the next step. The same walk produces the list
of questions that should be visible to the index, so the current question and
the visible questions always agree.

``same_room`` is recorded by :func:`set_risks` but is not consulted when
classifying: a ``Distance.NO`` answer resolves to ``Category.OTHER`` straight
away. Categories 3a and 3b are therefore never produced by :func:`classify`.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .models import (
    Assessment,
    Category,
    ClassificationResult,
    Distance,
    NeedsAssessment,
    Risk,
    Risks,
    Success,
)

LOGGER = logging.getLogger(__name__)

Step = Callable[[Risks], Optional[ClassificationResult]]


def _evaluate_same_household(risks: Risks) -> ClassificationResult | None:
    if risks.same_household is None:
        return NeedsAssessment(Risk.SAME_HOUSEHOLD)
    if risks.same_household:
        return Success(Category.CATEGORY_1)
    return None


def _evaluate_distance(risks: Risks) -> ClassificationResult | None:
    if risks.distance is None:
        return NeedsAssessment(Risk.DISTANCE)
    if risks.distance is Distance.YES_MORE_THAN_15_MIN:
        return Success(Category.CATEGORY_2A)
    if risks.distance is Distance.NO:
        return Success(Category.OTHER)
    return None


def _evaluate_physical_contact(risks: Risks) -> ClassificationResult:
    if risks.physical_contact is None:
        return NeedsAssessment(Risk.PHYSICAL_CONTACT)
    if risks.physical_contact:
        return Success(Category.CATEGORY_2B)
    return Success(Category.OTHER)


# The last step must always return a result.
_DECISION_CHAIN: Sequence[Tuple[Risk, Step]] = (
    (Risk.SAME_HOUSEHOLD, _evaluate_same_household),
    (Risk.DISTANCE, _evaluate_distance),
    (Risk.PHYSICAL_CONTACT, _evaluate_physical_contact),
)


def assess(risks: Risks) -> Assessment:
    """Classify ``risks`` and collect the risk questions consulted on the way."""

    visible: List[Risk] = []
    result: ClassificationResult | None = None
    for risk, evaluate in _DECISION_CHAIN:
        visible.append(risk)
        result = evaluate(risks)
        if result is not None:
            break

    LOGGER.debug("Classified %s -> %s (visible: %s)", risks, result, [r.value for r in visible])
    return Assessment(result=result, visible_risks=visible)


def classify(risks: Risks) -> ClassificationResult:
    """Return the category for ``risks`` or the next risk that needs an answer."""

    return assess(risks).result


def visible_risks(risks: Risks) -> List[Risk]:
    """Return the risk questions to show, in the order they are asked."""

    return assess(risks).visible_risks


_CANONICAL_RISKS: Dict[Category, Risks] = {
    Category.CATEGORY_1: Risks(same_household=True),
    Category.CATEGORY_2A: Risks(same_household=False, distance=Distance.YES_MORE_THAN_15_MIN),
    Category.CATEGORY_2B: Risks(
        same_household=False,
        distance=Distance.YES_LESS_THAN_15_MIN,
        physical_contact=True,
    ),
    Category.CATEGORY_3A: Risks(same_household=False, distance=Distance.NO, same_room=False),
    Category.CATEGORY_3B: Risks(same_household=False, distance=Distance.NO, same_room=False),
    Category.OTHER: Risks(same_household=False, distance=Distance.NO, same_room=False),
}


def set_risks(category: Category) -> Risks:
    """Return the risk answers that justify ``category``.

    Categories 3a, 3b and other share one record, which classifies as other.
    """

    return _CANONICAL_RISKS[Category(category)]


__all__ = ["assess", "classify", "set_risks", "visible_risks"]
