"""Plan editing service — facade for the API layer."""

from __future__ import annotations
import logging
import threading

from planner.models import (
    EditorSettings, SettingsUpdate, ToolMode, ViewState, PointerEvent,
)
from planner.core.controller import InteractionController, IdFactory, Transition, make_id
from planner.core.serializer import (
    PlanDocument, PlanSource, export_plan, import_plan, export_svg,
)
from planner.core.store import EntityStore

logger = logging.getLogger(__name__)


class PlanService:
    """Owns one plan and its editor; processes calls strictly one at a time."""

    def __init__(
        self,
        settings: EditorSettings | None = None,
        id_factory: IdFactory = make_id,
    ) -> None:
        self.store = EntityStore()
        self.controller = InteractionController(
            self.store, settings=settings, id_factory=id_factory,
        )
        self._lock = threading.Lock()

    @property
    def settings(self) -> EditorSettings:
        return self.controller.settings

    @property
    def state(self) -> ViewState:
        return self.controller.state

    def handle_event(self, event: PointerEvent) -> Transition:
        with self._lock:
            return self.controller.handle(event)

    def set_tool(self, tool: ToolMode) -> ViewState:
        with self._lock:
            self.controller.set_tool(tool)
            return self.controller.state

    def update_settings(self, update: SettingsUpdate) -> EditorSettings:
        with self._lock:
            self.controller.settings = update.apply_to(self.controller.settings)
            return self.controller.settings

    def export_plan(self) -> PlanDocument:
        with self._lock:
            document = export_plan(self.store, self.controller.settings)
        logger.info(
            "Exported plan with %d walls, %d openings",
            len(document.walls or []), len(document.openings or []),
        )
        return document

    def import_plan(self, source: PlanSource | PlanDocument) -> EditorSettings:
        with self._lock:
            self.controller.settings = import_plan(
                source, self.store, self.controller.settings,
            )
            self.controller.drop_stale_selection()
            return self.controller.settings

    def export_svg(self) -> str:
        with self._lock:
            return export_svg(self.store, self.controller.settings, self.controller.state)

    def clear(self) -> None:
        with self._lock:
            self.store.clear()
            self.controller.drop_stale_selection()
