"""Pydantic models for the issue skeleton a template produces.

The skeleton omits ``project_id`` and ``creator_id``; the issue service that
persists it assigns both.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from stagecraft.models.enums import TaskStatus, TaskType

# Issue type tags are open: every registered template contributes its own
ISSUE_TYPE_PATTERN = r"^bb\.issue\.[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$"


class TaskCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    status: TaskStatus
    type: TaskType
    instance_id: int
    database_id: int
    statement: str = ""
    rollback_statement: str = ""


class StageCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    environment_id: int
    task_list: list[TaskCreate] = Field(..., min_length=1)


class PipelineCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    stage_list: list[StageCreate] = Field(default_factory=list)


class IssueCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    type: str = Field(..., pattern=ISSUE_TYPE_PATTERN)
    description: str = ""
    pipeline: PipelineCreate
    # Opaque extension data; nothing here inspects it
    payload: dict[str, Any] = Field(default_factory=dict)
