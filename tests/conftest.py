import pytest

from planner.core.controller import InteractionController
from planner.core.store import EntityStore
from planner.models import EditorSettings
from planner.services.plan_service import PlanService
from tests.helpers import counting_ids


@pytest.fixture
def settings():
    # 100 px per meter, no snapping: screen (200, 10) is world (2, 0.1)
    return EditorSettings(scale=100.0, grid_size=0.5, snap=False)


@pytest.fixture
def store():
    return EntityStore()


@pytest.fixture
def controller(store, settings):
    return InteractionController(store, settings=settings, id_factory=counting_ids())


@pytest.fixture
def service(settings):
    return PlanService(settings=settings, id_factory=counting_ids())
