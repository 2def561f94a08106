"""JSON shapes returned by the HTTP API."""

from __future__ import annotations

from typing import Any, Dict

from ..classification import Assessment, ClassificationResult, NeedsAssessment, Risks


def serialize_result(result: ClassificationResult) -> Dict[str, Any]:
    if isinstance(result, NeedsAssessment):
        return {"type": "needsAssessment", "risk": result.risk.value}
    return {"type": "success", "category": result.category.value}


def serialize_assessment(assessment: Assessment) -> Dict[str, Any]:
    category = assessment.result.category
    return {
        "result": serialize_result(assessment.result),
        "category": category.value if category is not None else None,
        "visibleRisks": [risk.value for risk in assessment.visible_risks],
    }


def serialize_risks(risks: Risks) -> Dict[str, Any]:
    return {
        "sameHousehold": risks.same_household,
        "distance": risks.distance.value if risks.distance is not None else None,
        "physicalContact": risks.physical_contact,
        "sameRoom": risks.same_room,
    }


__all__ = ["serialize_assessment", "serialize_result", "serialize_risks"]
