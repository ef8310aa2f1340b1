"""Template registry mapping issue type tags to templates."""

from stagecraft.templates.base import IssueTemplate


def _build_registry() -> dict[str, IssueTemplate]:
    from stagecraft.templates.database_schema_update import TEMPLATE as schema_update

    return {
        schema_update.type: schema_update,
    }


_registry: dict[str, IssueTemplate] = {}


def _ensure_registry() -> None:
    if not _registry:
        _registry.update(_build_registry())


def register_template(template: IssueTemplate) -> None:
    """Register a template under its type tag, replacing any previous one."""
    _ensure_registry()
    _registry[template.type] = template


def get_template(issue_type: str) -> IssueTemplate | None:
    """Get the template registered for an issue type."""
    _ensure_registry()
    return _registry.get(issue_type)


def list_templates() -> list[IssueTemplate]:
    _ensure_registry()
    return list(_registry.values())
