"""Tests for template registration, lookup and issue dispatch."""

import pytest
from pydantic import ValidationError

from stagecraft.errors.exceptions import NotFoundError
from stagecraft.models.enums import IssueType
from stagecraft.models.issue import IssueCreate, PipelineCreate
from stagecraft.models.template import TemplateContext, TemplateField
from stagecraft.services.issue_builder import build_issue
from stagecraft.templates import registry
from stagecraft.templates.base import IssueTemplate
from stagecraft.templates.database_schema_update import TEMPLATE as SCHEMA_UPDATE


@pytest.fixture
def isolated_registry(monkeypatch):
    """Snapshot the registry so templates registered in a test do not leak."""
    registry._ensure_registry()
    monkeypatch.setattr(registry, "_registry", dict(registry._registry))
    return registry


def _stub_template(issue_type: str) -> IssueTemplate:
    def _build(context: TemplateContext) -> IssueCreate:
        return IssueCreate(
            name="Stub",
            type=issue_type,
            pipeline=PipelineCreate(name="Stub pipeline"),
        )

    return IssueTemplate(
        type=issue_type,
        build_issue=_build,
        input_field_list=(TemplateField(id=1, slug="ticket", name="Ticket", required=True),),
    )


class TestRegistry:
    def test_builtin_schema_update_registered(self):
        assert registry.get_template("bb.issue.database.schema.update") is SCHEMA_UPDATE

    def test_unknown_type_returns_none(self):
        assert registry.get_template("bb.issue.unknown") is None

    def test_list_templates_includes_builtin(self):
        types = [t.type for t in registry.list_templates()]
        assert IssueType.DATABASE_SCHEMA_UPDATE in types

    def test_register_custom_template(self, isolated_registry):
        stub = _stub_template("bb.issue.custom")
        isolated_registry.register_template(stub)

        assert isolated_registry.get_template("bb.issue.custom") is stub
        assert isolated_registry.get_template(IssueType.DATABASE_SCHEMA_UPDATE) is SCHEMA_UPDATE

    def test_register_replaces_existing(self, isolated_registry):
        stub = _stub_template(IssueType.DATABASE_SCHEMA_UPDATE)
        isolated_registry.register_template(stub)

        assert isolated_registry.get_template(IssueType.DATABASE_SCHEMA_UPDATE) is stub
        assert len(isolated_registry.list_templates()) == 1


class TestIssueBuilder:
    def test_dispatches_to_schema_update(self, staging_env, make_database):
        ctx = TemplateContext.from_parallel_lists(
            [make_database(1, "orders", staging_env)], [staging_env]
        )
        issue = build_issue("bb.issue.database.schema.update", ctx)
        assert issue.pipeline.stage_list[0].name == "[staging] orders"

    def test_unknown_type_raises_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            build_issue("bb.issue.unknown", TemplateContext())
        assert exc_info.value.status_code == 404
        assert "bb.issue.unknown" in exc_info.value.message

    def test_dispatches_to_registered_template(self, isolated_registry):
        isolated_registry.register_template(_stub_template("bb.issue.custom"))
        issue = build_issue("bb.issue.custom", TemplateContext())
        assert issue.name == "Stub"

    def test_template_builds_issue_of_its_own_type(self, isolated_registry):
        isolated_registry.register_template(_stub_template("bb.issue.database.create"))

        issue = build_issue("bb.issue.database.create", TemplateContext())

        assert issue.type == "bb.issue.database.create"
        assert issue.model_dump(mode="json")["type"] == "bb.issue.database.create"


class TestIssueTypeTag:
    @pytest.mark.parametrize("tag", ["bb.issue.general", "bb.issue.database.create", "bb.issue.data_source.request"])
    def test_accepts_registered_style_tags(self, tag):
        issue = IssueCreate(name="x", type=tag, pipeline=PipelineCreate(name="p"))
        assert issue.type == tag

    @pytest.mark.parametrize("tag", ["", "bb.task.database.schema.update", "bb.issue.", "BB.ISSUE.GENERAL"])
    def test_rejects_malformed_tags(self, tag):
        with pytest.raises(ValidationError):
            IssueCreate(name="x", type=tag, pipeline=PipelineCreate(name="p"))
