"""Template for the database schema update change type.

Each target becomes one stage holding one task. Stages keep the order of the
context targets since the pipeline runs them in that order, environment by
environment. A task lands in PENDING_APPROVAL when its environment demands
manual approval for every change, and in PENDING otherwise.
"""

from stagecraft.errors.exceptions import InvalidContextError, MissingReferenceError
from stagecraft.models.catalog import Database, Environment, Instance
from stagecraft.models.enums import ApprovalPolicy, IssueType, TaskStatus, TaskType
from stagecraft.models.issue import IssueCreate, PipelineCreate, StageCreate, TaskCreate
from stagecraft.models.template import DeploymentTarget, TemplateContext
from stagecraft.templates.base import IssueTemplate

ISSUE_NAME = "Update database schema"
PIPELINE_NAME = "Update database schema pipeline"


def _resolve_instance(database: Database) -> tuple[Instance, Environment]:
    instance = database.instance
    if instance is None:
        raise MissingReferenceError("Database", str(database.id), "instance")
    if instance.environment is None:
        raise MissingReferenceError("Instance", str(instance.id), "environment")
    return instance, instance.environment


def initial_task_status(environment: Environment) -> TaskStatus:
    """Gate a new task on its environment's approval policy."""
    if environment.approval_policy == ApprovalPolicy.MANUAL_APPROVAL_ALWAYS:
        return TaskStatus.PENDING_APPROVAL
    return TaskStatus.PENDING


def build_stage(target: DeploymentTarget) -> StageCreate:
    database = target.database
    environment = target.environment
    instance, instance_environment = _resolve_instance(database)
    if instance_environment.id != environment.id:
        raise InvalidContextError(
            f"Database '{database.name}' lives in environment "
            f"'{instance_environment.name}' but is paired with '{environment.name}'",
            details={
                "database_id": database.id,
                "instance_environment_id": instance_environment.id,
                "environment_id": environment.id,
            },
        )

    task = TaskCreate(
        name=f"Update {database.name} schema",
        status=initial_task_status(environment),
        type=TaskType.DATABASE_SCHEMA_UPDATE,
        instance_id=instance.id,
        database_id=database.id,
        statement="",
        rollback_statement="",
    )
    return StageCreate(
        name=f"[{instance_environment.name}] {database.name}",
        environment_id=environment.id,
        task_list=[task],
    )


def build_issue(context: TemplateContext) -> IssueCreate:
    """Compile the context into a schema update issue skeleton."""
    # No deduplication: a database listed twice gets two stages
    stage_list = [build_stage(target) for target in context.targets]
    return IssueCreate(
        name=ISSUE_NAME,
        type=IssueType.DATABASE_SCHEMA_UPDATE,
        description="",
        pipeline=PipelineCreate(name=PIPELINE_NAME, stage_list=stage_list),
        payload={},
    )


TEMPLATE = IssueTemplate(
    type=IssueType.DATABASE_SCHEMA_UPDATE,
    build_issue=build_issue,
    input_field_list=(),
    output_field_list=(),
)
