"""Issue builder - dispatches a build context to the template for an issue type."""

import logging

from stagecraft.errors.exceptions import NotFoundError
from stagecraft.models.enums import TaskStatus
from stagecraft.models.issue import IssueCreate
from stagecraft.models.template import TemplateContext
from stagecraft.templates.registry import get_template

logger = logging.getLogger(__name__)


def build_issue(issue_type: str, context: TemplateContext) -> IssueCreate:
    """Build the issue skeleton for ``issue_type`` from ``context``.

    Targets are checked more strictly than the bare pairing requires: a
    database whose instance sits in a different environment than the one it
    is paired with is rejected rather than built with a mixed stage name and
    gate.

    Raises:
        NotFoundError: No template is registered for the type.
        InvalidContextError: A target pairs a database with a foreign environment.
        MissingReferenceError: A database has no instance or environment.
    """
    template = get_template(issue_type)
    if template is None:
        raise NotFoundError("Issue template", issue_type)

    issue = template.build_issue(context)

    approval_count = sum(
        1
        for stage in issue.pipeline.stage_list
        for task in stage.task_list
        if task.status == TaskStatus.PENDING_APPROVAL
    )
    logger.info(
        "Built %s issue with %d stages (%d awaiting approval)",
        issue_type,
        len(issue.pipeline.stage_list),
        approval_count,
    )
    return issue
