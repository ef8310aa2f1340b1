"""Pydantic models for template input: the build context and field metadata."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from stagecraft.errors.exceptions import InvalidContextError
from stagecraft.models.catalog import Database, Environment
from stagecraft.models.enums import FieldType


class DeploymentTarget(BaseModel):
    """One database paired with the environment it is deployed to."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    database: Database
    environment: Environment


class TemplateContext(BaseModel):
    """Ordered deployment targets a template compiles into an issue.

    Target order is execution order: the resulting stages follow it exactly.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    targets: list[DeploymentTarget] = Field(default_factory=list)

    @classmethod
    def from_parallel_lists(
        cls,
        database_list: Sequence[Database],
        environment_list: Sequence[Environment],
    ) -> "TemplateContext":
        """Pair index-aligned database and environment lists.

        Raises:
            InvalidContextError: The two lists differ in length.
        """
        if len(database_list) != len(environment_list):
            raise InvalidContextError(
                f"database_list has {len(database_list)} entries but "
                f"environment_list has {len(environment_list)}",
                details={
                    "database_count": len(database_list),
                    "environment_count": len(environment_list),
                },
            )
        return cls(
            targets=[
                DeploymentTarget(database=db, environment=env)
                for db, env in zip(database_list, environment_list)
            ]
        )

    @property
    def database_list(self) -> list[Database]:
        return [t.database for t in self.targets]

    @property
    def environment_list(self) -> list[Environment]:
        return [t.environment for t in self.targets]


class TemplateField(BaseModel):
    """Declarative description of a template input or output field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    slug: str = Field(..., pattern=r"^[a-z][a-z0-9_-]*$")
    name: str
    type: FieldType = FieldType.STRING
    required: bool = False
