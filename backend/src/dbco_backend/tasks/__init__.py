"""Contact task models, ordering, progress, suggestions and serialization."""

from .encoding import contact_payload, task_payload
from .models import (
    INDEX_WONT_INFORM,
    Communication,
    Contact,
    ContactDetails,
    Source,
    Task,
    TaskType,
    apply_classification,
)
from .progress import (
    answer_progress,
    classification_progress,
    contact_details_progress,
    questionnaire_progress,
)
from .sorting import compare_tasks, sort_tasks
from .suggestions import suggestions

__all__ = [
    "INDEX_WONT_INFORM",
    "Communication",
    "Contact",
    "ContactDetails",
    "Source",
    "Task",
    "TaskType",
    "answer_progress",
    "apply_classification",
    "classification_progress",
    "compare_tasks",
    "contact_details_progress",
    "contact_payload",
    "questionnaire_progress",
    "sort_tasks",
    "suggestions",
    "task_payload",
]
