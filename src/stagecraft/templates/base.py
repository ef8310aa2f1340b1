"""Issue template contract shared by every change type."""

from collections.abc import Callable
from dataclasses import dataclass, field

from stagecraft.models.issue import IssueCreate
from stagecraft.models.template import TemplateContext, TemplateField


@dataclass(frozen=True)
class IssueTemplate:
    """A change type: its tag, its pipeline builder and its field metadata.

    ``build_issue`` must be pure; the same context always yields an equal
    skeleton. Field lists are read by form renderers, never by the builder.
    """

    type: str
    build_issue: Callable[[TemplateContext], IssueCreate]
    input_field_list: tuple[TemplateField, ...] = field(default_factory=tuple)
    output_field_list: tuple[TemplateField, ...] = field(default_factory=tuple)
