"""Serialize tasks for the health authority API or for local storage."""

from __future__ import annotations

from typing import Any, Dict, Literal

from ..classification import Category
from .models import INDEX_WONT_INFORM, Communication, Task

Target = Literal["api", "storage"]


def contact_payload(task: Task, target: Target) -> Dict[str, Any]:
    contact = task.contact
    category: Category | None = contact.category
    communication: Communication | None = contact.communication
    informed_by_index_at = contact.informed_by_index_at

    if target == "api":
        # The API expects null rather than the app's placeholder values.
        if category is Category.OTHER:
            category = None
        if communication is Communication.UNKNOWN:
            communication = None
        if informed_by_index_at == INDEX_WONT_INFORM:
            informed_by_index_at = None

    payload: Dict[str, Any] = {
        "category": category.value if category is not None else None,
        "communication": communication.value if communication is not None else None,
        "dateOfLastExposure": contact.date_of_last_exposure,
        "shareIndexNameWithContact": contact.share_index_name_with_contact,
        "informedByIndexAt": informed_by_index_at,
    }
    if target == "storage":
        payload["contactIdentifier"] = contact.contact_identifier
    return payload


def task_payload(task: Task, target: Target = "api") -> Dict[str, Any]:
    """Return a JSON-ready dict for ``task``.

    Raises:
        ValueError: if ``target`` is not ``"api"`` or ``"storage"``.
    """

    if target not in ("api", "storage"):
        raise ValueError(f"Unknown encoding target: {target!r}")

    payload: Dict[str, Any] = {
        "uuid": str(task.uuid),
        "source": task.source.value,
        "label": task.label,
        "taskContext": task.task_context,
        "taskType": task.task_type.value,
        "deletedByIndex": task.deleted_by_index,
    }
    payload.update(contact_payload(task, target))

    # Deleted tasks carry no answers to the API.
    if target == "api" and task.deleted_by_index:
        return payload

    details = task.contact_details
    payload["contactDetails"] = (
        {
            "firstName": details.first_name,
            "lastName": details.last_name,
            "email": details.email,
            "phoneNumber": details.phone_number,
        }
        if details is not None
        else None
    )

    if target == "storage":
        payload["isSyncedWithPortal"] = task.is_synced_with_portal
    return payload


__all__ = ["Target", "contact_payload", "task_payload"]
