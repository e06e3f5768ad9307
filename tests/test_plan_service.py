from planner.models import SettingsUpdate, ToolMode
from tests.helpers import move, press, release


def test_import_drops_selection_of_replaced_entities(service):
    service.handle_event(press(0, 0))
    service.handle_event(move(300, 0))
    service.handle_event(release(300, 0))
    service.set_tool(ToolMode.SELECT)
    service.handle_event(press(100, 0))
    assert service.state.selected_id == "w_1"

    service.import_plan({"walls": [{"id": "other", "x1": 0, "y1": 5, "x2": 1, "y2": 5}]})
    assert service.state.selected_id is None
    assert [w.id for w in service.store.list_walls()] == ["other"]


def test_partial_import_keeps_selection(service):
    service.handle_event(press(0, 0))
    service.handle_event(move(300, 0))
    service.handle_event(release(300, 0))
    service.set_tool(ToolMode.SELECT)
    service.handle_event(press(100, 0))
    service.import_plan('{"scale": 50}')
    assert service.state.selected_id == "w_1"
    assert service.settings.scale == 50


def test_clear_removes_everything(service):
    service.handle_event(press(0, 0))
    service.handle_event(move(300, 0))
    service.handle_event(release(300, 0))
    service.clear()
    assert len(service.store) == 0
    assert service.export_plan().walls == []


def test_update_settings_changes_only_given_fields(service):
    updated = service.update_settings(SettingsUpdate(grid_size=0.25))
    assert updated.grid_size == 0.25
    assert updated.scale == 100.0
    assert updated.snap is False


def test_svg_export_does_not_mutate(service):
    service.handle_event(press(0, 0))
    service.handle_event(move(300, 0))
    before = service.state
    svg = service.export_svg()
    assert 'stroke-dasharray="6 4"' in svg
    assert service.state == before
    assert len(service.store) == 0
