"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from stagecraft.models.catalog import Database, Environment, Instance
from stagecraft.models.enums import ApprovalPolicy


@pytest.fixture
def staging_env() -> Environment:
    return Environment(id=1, name="staging", order=0, approval_policy=ApprovalPolicy.AUTO)


@pytest.fixture
def prod_env() -> Environment:
    return Environment(id=2, name="prod", order=1, approval_policy=ApprovalPolicy.MANUAL_APPROVAL_ALWAYS)


@pytest.fixture
def make_database():
    """Factory for a database hosted on an instance in the given environment."""

    def _make(db_id: int, name: str, environment: Environment, instance_id: int | None = None) -> Database:
        instance = Instance(
            id=instance_id if instance_id is not None else 100 + environment.id,
            name=f"{environment.name}-mysql",
            environment=environment,
        )
        return Database(id=db_id, name=name, instance=instance)

    return _make


@pytest.fixture
def app():
    """Create a test application instance."""
    from stagecraft.main import create_app

    return create_app()


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
