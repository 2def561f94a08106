"""Contact tasks: the people an index lists as possibly exposed."""

from __future__ import annotations

from uuid import UUID, uuid4
from dataclasses import dataclass, field, replace
from enum import Enum

from ..classification import Category, Risks, Success, classify

# Stored in ``informed_by_index_at`` when the index chose not to inform the
# contact. Internal only; never sent to the API.
INDEX_WONT_INFORM = "index-wont-inform"


class Communication(str, Enum):
    """Who informs the contact."""

    STAFF = "staff"
    INDEX = "index"
    UNKNOWN = "unknown"


class Source(str, Enum):
    APP = "app"
    PORTAL = "portal"


class TaskType(str, Enum):
    CONTACT = "contact"


@dataclass(frozen=True, slots=True)
class ContactDetails:
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None


@dataclass(frozen=True, slots=True)
class Contact:
    category: Category = Category.OTHER
    communication: Communication = Communication.UNKNOWN
    informed_by_index_at: str | None = None
    date_of_last_exposure: str | None = None  # yyyy-MM-dd
    share_index_name_with_contact: bool | None = None
    contact_identifier: str | None = None

    @property
    def did_inform(self) -> bool:
        """True once the index reported informing the contact."""

        return self.informed_by_index_at not in (None, INDEX_WONT_INFORM)


@dataclass(frozen=True, slots=True)
class Task:
    """A unit of contact tracing work, completed by answering its questionnaire."""

    uuid: UUID = field(default_factory=uuid4)
    task_type: TaskType = TaskType.CONTACT
    source: Source = Source.APP
    label: str | None = None
    task_context: str | None = None
    contact: Contact = field(default_factory=Contact)
    contact_details: ContactDetails | None = None
    deleted_by_index: bool = False
    is_synced_with_portal: bool = False

    @property
    def contact_name(self) -> str | None:
        """Full name from the contact details, falling back to ``label``."""

        if self.contact_details is not None:
            parts = [self.contact_details.first_name, self.contact_details.last_name]
            full_name = " ".join(part for part in parts if part is not None)
            if full_name:
                return full_name
        return self.label

    @property
    def contact_first_name(self) -> str | None:
        if self.contact_details is not None and self.contact_details.first_name is not None:
            return self.contact_details.first_name
        return self.label

    @property
    def is_or_can_be_informed(self) -> bool:
        if self.task_type is not TaskType.CONTACT:
            return False

        communication = self.contact.communication
        if communication is Communication.INDEX:
            return self.contact.did_inform
        if communication is Communication.STAFF:
            # Staff can only reach the contact by e-mail or phone.
            details = self.contact_details or ContactDetails()
            return bool(details.email) or bool(details.phone_number)
        return False


def apply_classification(task: Task, risks: Risks) -> Task:
    """Return ``task`` with its category taken from ``risks`` when they classify."""

    result = classify(risks)
    if not isinstance(result, Success):
        return task
    return replace(task, contact=replace(task.contact, category=result.category))


__all__ = [
    "INDEX_WONT_INFORM",
    "Communication",
    "Contact",
    "ContactDetails",
    "Source",
    "Task",
    "TaskType",
    "apply_classification",
]
