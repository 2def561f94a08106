"""FastAPI application exposing contact classification and task ordering."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List
from uuid import UUID

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from ..classification import Category, Distance, Risks, assess, set_risks
from ..config import get_settings
from ..logging_utils import configure_logging, log_event
from ..metrics import metrics_summary, outcome_label, record_latency, record_outcome
from ..tasks import (
    Communication,
    Contact,
    ContactDetails,
    Source,
    Task,
    TaskType,
    sort_tasks,
    task_payload,
)
from .serializers import serialize_assessment, serialize_risks

LOGGER = logging.getLogger(__name__)


class RisksRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    same_household: bool | None = Field(
        default=None,
        alias="sameHousehold",
        description="Lives in the same household, or more than 12 hours of comparable exposure.",
    )
    distance: Distance | None = Field(default=None, description="Within 1.5 metres, and for how long.")
    physical_contact: bool | None = Field(default=None, alias="physicalContact")
    same_room: bool | None = Field(default=None, alias="sameRoom")

    def to_risks(self) -> Risks:
        return Risks(
            same_household=self.same_household,
            distance=self.distance,
            physical_contact=self.physical_contact,
            same_room=self.same_room,
        )


class ContactDetailsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    phone_number: str | None = Field(default=None, alias="phoneNumber")


class TaskRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uuid: UUID
    source: Source = Source.APP
    task_type: TaskType = Field(default=TaskType.CONTACT, alias="taskType")
    label: str | None = None
    task_context: str | None = Field(default=None, alias="taskContext")
    category: Category = Category.OTHER
    communication: Communication = Communication.UNKNOWN
    informed_by_index_at: str | None = Field(default=None, alias="informedByIndexAt")
    date_of_last_exposure: str | None = Field(
        default=None,
        alias="dateOfLastExposure",
        pattern=r"^\d{4}-\d{2}-\d{2}$",
    )
    share_index_name_with_contact: bool | None = Field(default=None, alias="shareIndexNameWithContact")
    contact_details: ContactDetailsRequest | None = Field(default=None, alias="contactDetails")
    deleted_by_index: bool = Field(default=False, alias="deletedByIndex")

    def to_task(self) -> Task:
        details = None
        if self.contact_details is not None:
            details = ContactDetails(
                first_name=self.contact_details.first_name,
                last_name=self.contact_details.last_name,
                email=self.contact_details.email,
                phone_number=self.contact_details.phone_number,
            )
        return Task(
            uuid=self.uuid,
            task_type=self.task_type,
            source=self.source,
            label=self.label,
            task_context=self.task_context,
            contact=Contact(
                category=self.category,
                communication=self.communication,
                informed_by_index_at=self.informed_by_index_at,
                date_of_last_exposure=self.date_of_last_exposure,
                share_index_name_with_contact=self.share_index_name_with_contact,
            ),
            contact_details=details,
            deleted_by_index=self.deleted_by_index,
        )


class SortTasksRequest(BaseModel):
    tasks: List[TaskRequest] = Field(default_factory=list)


def create_app() -> FastAPI:
    configure_logging()
    settings = get_settings()

    app = FastAPI(title="GGD Contact Backend", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthz", tags=["system"])
    def healthcheck() -> Dict[str, Any]:
        return {"status": "ok"}

    @app.post("/v1/classification", tags=["classification"])
    def classify_contact(payload: RisksRequest) -> Dict[str, Any]:
        start = time.perf_counter()
        assessment = assess(payload.to_risks())
        duration = time.perf_counter() - start

        record_outcome(assessment.result)
        record_latency("classification", duration)
        if duration > settings.classification_latency_budget:
            LOGGER.warning(
                "Classification exceeded latency budget: %.3f s > %.3f s",
                duration,
                settings.classification_latency_budget,
            )

        log_event(
            "contact_classified",
            {
                "outcome": outcome_label(assessment.result),
                "visible_risks": [risk.value for risk in assessment.visible_risks],
                "classification_ms": duration * 1000,
            },
            level=logging.DEBUG,
        )
        return serialize_assessment(assessment)

    @app.get("/v1/classification/categories/{category}/risks", tags=["classification"])
    def category_risks(category: Category) -> Dict[str, Any]:
        return serialize_risks(set_risks(category))

    @app.post("/v1/tasks/sort", tags=["tasks"])
    def sort_contact_tasks(payload: SortTasksRequest) -> Dict[str, Any]:
        start = time.perf_counter()
        ordered = sort_tasks(item.to_task() for item in payload.tasks)
        record_latency("task_sort", time.perf_counter() - start)
        return {"tasks": [task_payload(task, "api") for task in ordered]}

    @app.get("/metrics/classification", tags=["metrics"])
    def classification_metrics() -> Dict[str, Any]:
        return metrics_summary()

    return app


app = create_app()

__all__ = ["RisksRequest", "SortTasksRequest", "TaskRequest", "app", "create_app"]
