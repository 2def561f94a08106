"""Exposure risk classification of index contacts."""

from .classifier import assess, classify, set_risks, visible_risks
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

__all__ = [
    "Assessment",
    "Category",
    "ClassificationResult",
    "Distance",
    "NeedsAssessment",
    "Risk",
    "Risks",
    "Success",
    "assess",
    "classify",
    "set_risks",
    "visible_risks",
]
