"""String enums shared by the catalog, template and issue models."""

from enum import StrEnum


class ApprovalPolicy(StrEnum):
    AUTO = "AUTO"
    MANUAL_APPROVAL_ALWAYS = "MANUAL_APPROVAL_ALWAYS"


class TaskStatus(StrEnum):
    PENDING = "PENDING"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    RUNNING = "RUNNING"
    DONE = "DONE"
    FAILED = "FAILED"
    CANCELED = "CANCELED"


class IssueType(StrEnum):
    DATABASE_SCHEMA_UPDATE = "bb.issue.database.schema.update"


class TaskType(StrEnum):
    DATABASE_SCHEMA_UPDATE = "bb.task.database.schema.update"


class SyncStatus(StrEnum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"


class FieldType(StrEnum):
    STRING = "String"
    BOOLEAN = "Boolean"
