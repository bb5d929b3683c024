import logging
from collections.abc import Callable

import pytest
import pytest_asyncio
from _pytest.monkeypatch import MonkeyPatch
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from dependent_filters.filters import DependentFilter
from dependent_filters.resources import Lens, Resource, ResourceRegistry

logger = logging.getLogger(__name__)

COUNTRIES = {"US": "United States", "CA": "Canada"}
STATES = {"US": {"NY": "New York", "TX": "Texas"}, "CA": {"ON": "Ontario"}}
PLANS = {"free": {"label": "Free", "price": 0}, "pro": {"label": "Pro", "price": 10}}


def states_for_country(request, filters):
    return STATES.get(filters["country"], {})


class ActiveUsers(Lens):
    def __init__(self, plan: DependentFilter):
        self.plan = plan

    def filters(self, request):
        return [self.plan]


class Users(Resource):
    uri_key = "users"

    def __init__(self):
        self.country = DependentFilter.make("Country").with_options(COUNTRIES)
        self.state = DependentFilter.make("State").with_options(states_for_country, dependent_of="country")
        self.plan = DependentFilter.make("Plan").with_options(PLANS).hide_when_empty()
        self.broken = DependentFilter.make("Broken")

    def filters(self, request):
        return [self.country, self.state, self.broken]

    def lenses(self, request):
        return [ActiveUsers(self.plan)]


@pytest.fixture(scope="session")
def session_monkeypatch():
    m_patch = MonkeyPatch()
    yield m_patch
    m_patch.undo()


@pytest.fixture(autouse=True, scope="session")
def setup_env(session_monkeypatch):
    """
    Setup test environment
    """
    logger.info("Setting up test environment")
    session_monkeypatch.setenv("DEBUG", "true")
    session_monkeypatch.setenv("ENV", "dev")
    session_monkeypatch.setenv("SERVER_HOST", "http://localhost:8000")
    session_monkeypatch.setenv("BACKEND_CORS_ORIGINS", '["http://localhost"]')
    session_monkeypatch.setenv("RESOURCE_MODULES", "[]")
    yield


@pytest.fixture
def users_resource() -> Users:
    return Users()


@pytest.fixture
def resource_registry(users_resource) -> ResourceRegistry:
    _registry = ResourceRegistry()
    _registry.register(users_resource)
    return _registry


@pytest.fixture
def override_get_resource_registry(resource_registry) -> Callable:
    async def _override_get_resource_registry():
        return resource_registry

    return _override_get_resource_registry


@pytest.fixture
def app(setup_env, override_get_resource_registry: Callable) -> FastAPI:
    # Import only after setting up the environment
    from dependent_filters.core.dependencies import get_resource_registry  # noqa
    from dependent_filters.main import app  # noqa

    app.dependency_overrides[get_resource_registry] = override_get_resource_registry
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def async_client(app: FastAPI):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
