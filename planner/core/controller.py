"""Interaction controller — the tool state machine.

Pointer handling is a pure reducer: `reduce(state, event, context)` returns
the next view state plus a list of store effects. `InteractionController`
keeps the current state and applies those effects to the entity store.
"""

from __future__ import annotations
import logging
import uuid
from typing import Callable
from pydantic import BaseModel, Field

from planner.errors import DegenerateGeometry
from planner.models import (
    Point2D, Wall, Opening, OpeningType,
    EditorSettings, ToolMode, DraftWall, PanGesture, ViewState,
    PointerAction, PointerButton, PointerEvent,
    AddWall, RemoveWall, AddOpening, RemoveOpening, StoreEffect,
    MIN_WALL_LENGTH, DEFAULT_OPENING_LENGTH,
)
from planner.core.queries import EntityKind, find_nearest_wall, pick_entity
from planner.core.snapping import snap_to_grid
from planner.core.store import EntityStore
from planner.core.transform import ViewTransform

logger = logging.getLogger(__name__)

IdFactory = Callable[[str], str]

WALL_ID_PREFIX = "w"
OPENING_ID_PREFIX = "op"


def make_id(prefix: str) -> str:
    """Opaque id such as 'w_3f9a1c2'."""
    return f"{prefix}_{uuid.uuid4().hex[:7]}"


class InteractionContext(BaseModel):
    """Read-only view of the plan handed to the reducer."""
    settings: EditorSettings
    walls: list[Wall] = []
    openings: list[Opening] = []


class Transition(BaseModel):
    """Outcome of one event: the next state and the store changes it implies."""
    state: ViewState
    effects: list[StoreEffect] = Field(default_factory=list)


def wall_from_draft(
    draft: DraftWall, wall_id: str, min_length: float = MIN_WALL_LENGTH,
) -> Wall:
    """Turn a finished draft into a wall, rejecting click-sized segments."""
    length = draft.length
    if length <= min_length:
        raise DegenerateGeometry(length, min_length)
    return Wall.between(wall_id, draft.start, draft.end)


def pointer_to_world(
    state: ViewState, event: PointerEvent, settings: EditorSettings,
) -> Point2D:
    """Screen point of `event` in world meters, snapped if snapping is on."""
    transform = ViewTransform(settings.scale, state.pan)
    world = transform.screen_to_world(event.screen)
    return snap_to_grid(world, settings.grid_size, settings.snap)


def reduce(
    state: ViewState,
    event: PointerEvent,
    context: InteractionContext,
    new_id: IdFactory = make_id,
) -> Transition:
    if event.action == PointerAction.DOWN:
        return _on_press(state, event, context, new_id)
    if event.action == PointerAction.MOVE:
        return _on_move(state, event, context)
    if event.action == PointerAction.UP:
        return _on_release(state, new_id)
    # LEAVE: abandon whatever gesture is running
    if state.gesture_active:
        logger.debug("Pointer left surface, gesture abandoned")
    return Transition(state=state.model_copy(update={"draft": None, "pan_gesture": None}))


def _on_press(
    state: ViewState,
    event: PointerEvent,
    context: InteractionContext,
    new_id: IdFactory,
) -> Transition:
    # One gesture per press-to-release cycle
    if state.gesture_active:
        return Transition(state=state)

    if event.button == PointerButton.MIDDLE:
        gesture = PanGesture(origin=event.screen, start_pan=state.pan)
        return Transition(state=state.model_copy(update={"pan_gesture": gesture}))
    if event.button != PointerButton.PRIMARY:
        return Transition(state=state)

    world = pointer_to_world(state, event, context.settings)
    tool = state.tool

    if tool == ToolMode.WALL:
        draft = DraftWall(start=world, end=world)
        return Transition(state=state.model_copy(update={"draft": draft}))

    if tool == ToolMode.SELECT:
        hit = pick_entity(world, context.walls, context.openings)
        selected = hit.id if hit else None
        return Transition(state=state.model_copy(update={"selected_id": selected}))

    if tool == ToolMode.ERASE:
        hit = pick_entity(world, context.walls, context.openings)
        if hit is None:
            logger.debug("Nothing to erase at (%.3f, %.3f)", world.x, world.y)
            return Transition(state=state)
        effect: StoreEffect
        if hit.kind == EntityKind.WALL:
            effect = RemoveWall(wall_id=hit.id)
        else:
            effect = RemoveOpening(opening_id=hit.id)
        if state.selected_id == hit.id:
            state = state.model_copy(update={"selected_id": None})
        return Transition(state=state, effects=[effect])

    # DOOR / WINDOW
    nearest = find_nearest_wall(world, context.walls)
    if nearest is None:
        logger.debug("No wall near (%.3f, %.3f) for %s", world.x, world.y, tool.value)
        return Transition(state=state)
    opening = Opening(
        id=new_id(OPENING_ID_PREFIX),
        type=OpeningType(tool.value),
        x=nearest.projection.x,
        y=nearest.projection.y,
        angle=nearest.wall.angle,
        length=DEFAULT_OPENING_LENGTH,
    )
    return Transition(state=state, effects=[AddOpening(opening=opening)])


def _on_move(
    state: ViewState, event: PointerEvent, context: InteractionContext,
) -> Transition:
    update: dict = {}
    if state.draft is not None:
        end = pointer_to_world(state, event, context.settings)
        update["draft"] = DraftWall(start=state.draft.start, end=end)
    if state.pan_gesture is not None:
        gesture = state.pan_gesture
        update["pan"] = gesture.start_pan + (event.screen - gesture.origin)
    if not update:
        return Transition(state=state)
    return Transition(state=state.model_copy(update=update))


def _on_release(state: ViewState, new_id: IdFactory) -> Transition:
    effects: list[StoreEffect] = []
    if state.draft is not None:
        try:
            wall = wall_from_draft(state.draft, new_id(WALL_ID_PREFIX))
        except DegenerateGeometry as exc:
            logger.debug("Draft discarded: %s", exc)
        else:
            effects.append(AddWall(wall=wall))
    next_state = state.model_copy(update={"draft": None, "pan_gesture": None})
    return Transition(state=next_state, effects=effects)


class InteractionController:
    """
    Holds the view state and applies reducer output to the entity store.

    Events must be fed in arrival order; each call completes its store
    mutations before returning.
    """

    def __init__(
        self,
        store: EntityStore,
        settings: EditorSettings | None = None,
        state: ViewState | None = None,
        id_factory: IdFactory = make_id,
    ) -> None:
        self.store = store
        self.settings = settings or EditorSettings()
        self.state = state or ViewState()
        self.id_factory = id_factory

    def context(self) -> InteractionContext:
        return InteractionContext(
            settings=self.settings,
            walls=self.store.list_walls(),
            openings=self.store.list_openings(),
        )

    def handle(self, event: PointerEvent) -> Transition:
        transition = reduce(self.state, event, self.context(), self.fresh_id)
        self.apply(transition.effects)
        self.state = transition.state
        return transition

    def fresh_id(self, prefix: str) -> str:
        """Draw ids from the factory until one is unused in its collection."""
        lookup = self.store.get_wall if prefix == WALL_ID_PREFIX else self.store.get_opening
        new_id = self.id_factory(prefix)
        while lookup(new_id) is not None:
            new_id = self.id_factory(prefix)
        return new_id

    def apply(self, effects: list[StoreEffect]) -> None:
        for effect in effects:
            if isinstance(effect, AddWall):
                self.store.add_wall(effect.wall)
            elif isinstance(effect, RemoveWall):
                self.store.remove_wall(effect.wall_id)
            elif isinstance(effect, AddOpening):
                self.store.add_opening(effect.opening)
            elif isinstance(effect, RemoveOpening):
                self.store.remove_opening(effect.opening_id)

    def set_tool(self, tool: ToolMode) -> None:
        self.state = self.state.model_copy(update={"tool": tool})

    def drop_stale_selection(self) -> None:
        """Forget the selection if its entity no longer exists."""
        sel = self.state.selected_id
        if sel is None:
            return
        if self.store.get_wall(sel) is None and self.store.get_opening(sel) is None:
            self.state = self.state.model_copy(update={"selected_id": None})
