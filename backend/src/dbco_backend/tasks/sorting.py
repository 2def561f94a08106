"""Overview ordering of contact tasks."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

from ..classification import Category
from .models import Task, TaskType

# Tasks without a known exposure date are treated as the most recent.
FALLBACK_EXPOSURE_DATE = "9999-12-31"


def compare_tasks(lhs: Task, rhs: Task) -> int:
    """Household contacts first, then most recent exposure, then by name."""

    if lhs.task_type is not TaskType.CONTACT or rhs.task_type is not TaskType.CONTACT:
        return 0

    lhs_household = lhs.contact.category is Category.CATEGORY_1
    rhs_household = rhs.contact.category is Category.CATEGORY_1
    if lhs_household != rhs_household:
        return -1 if lhs_household else 1

    lhs_date = lhs.contact.date_of_last_exposure or FALLBACK_EXPOSURE_DATE
    rhs_date = rhs.contact.date_of_last_exposure or FALLBACK_EXPOSURE_DATE
    if lhs_date != rhs_date:
        return -1 if lhs_date > rhs_date else 1

    lhs_name = lhs.contact_name or ""
    rhs_name = rhs.contact_name or ""
    if lhs_name == rhs_name:
        return 0
    return -1 if lhs_name < rhs_name else 1


def sort_tasks(tasks: Iterable[Task]) -> List[Task]:
    return sorted(tasks, key=cmp_to_key(compare_tasks))


__all__ = ["FALLBACK_EXPOSURE_DATE", "compare_tasks", "sort_tasks"]
