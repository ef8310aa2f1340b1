"""Issue template routes: list registered templates and build issue skeletons."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from stagecraft.errors.exceptions import NotFoundError
from stagecraft.logging_config import bind_issue_type
from stagecraft.models.catalog import Database, Environment
from stagecraft.models.template import TemplateContext
from stagecraft.services.issue_builder import build_issue
from stagecraft.templates.base import IssueTemplate
from stagecraft.templates.registry import get_template, list_templates

router = APIRouter(tags=["Issue templates"])


class BuildIssueRequest(BaseModel):
    """Resolved targets, as index-aligned database and environment lists."""

    model_config = ConfigDict(extra="forbid")

    database_list: list[Database] = Field(default_factory=list)
    environment_list: list[Environment] = Field(default_factory=list)


def _serialize_template(t: IssueTemplate) -> dict:
    return {
        "type": t.type,
        "input_field_list": [f.model_dump(mode="json") for f in t.input_field_list],
        "output_field_list": [f.model_dump(mode="json") for f in t.output_field_list],
    }


@router.get("/issue-templates", status_code=200)
async def list_issue_templates() -> list[dict]:
    return [_serialize_template(t) for t in list_templates()]


@router.get("/issue-templates/{issue_type}", status_code=200)
async def get_issue_template(issue_type: str) -> dict:
    template = get_template(issue_type)
    if template is None:
        raise NotFoundError("Issue template", issue_type)
    return _serialize_template(template)


@router.post("/issue-templates/{issue_type}/build", status_code=200)
async def build_issue_skeleton(
    issue_type: str,
    body: BuildIssueRequest,
) -> dict:
    bind_issue_type(issue_type)
    context = TemplateContext.from_parallel_lists(body.database_list, body.environment_list)
    issue = build_issue(issue_type, context)
    return issue.model_dump(mode="json")
