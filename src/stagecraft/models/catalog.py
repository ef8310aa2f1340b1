"""Pydantic models for the database catalog: environments, instances, databases.

These records are loaded and resolved by the caller; templates only read them.
"""

from pydantic import BaseModel, ConfigDict, Field

from stagecraft.models.enums import ApprovalPolicy, SyncStatus

DEFAULT_CHARACTER_SET = "utf8mb4"
# utf8mb4_general_ci rather than the MySQL 8.0 default so MariaDB and other flavors accept it
DEFAULT_COLLATION = "utf8mb4_general_ci"


class Environment(BaseModel):
    """A deployment tier and the approval policy gating changes to it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    order: int = 0
    approval_policy: ApprovalPolicy = ApprovalPolicy.AUTO


class Instance(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    engine: str = "MYSQL"
    host: str = "localhost"
    port: str | None = None
    environment: Environment | None = None


class Database(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    instance: Instance | None = None
    project_id: int | None = None
    character_set: str = DEFAULT_CHARACTER_SET
    collation: str = DEFAULT_COLLATION
    sync_status: SyncStatus = SyncStatus.OK
