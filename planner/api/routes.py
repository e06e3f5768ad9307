"""FastAPI route definitions."""

from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from planner.errors import MalformedDocument
from planner.models import PointerEvent, SettingsUpdate
from planner.services.plan_service import PlanService
from planner.api.schemas import (
    EventResponse, ImportResponse, StateResponse, ToolRequest,
)

router = APIRouter()

# Shared service instance
_service = PlanService()


def get_service() -> PlanService:
    return _service


def _state(service: PlanService) -> StateResponse:
    return StateResponse(state=service.state, settings=service.settings)


@router.get("/state", response_model=StateResponse)
async def get_state(service: PlanService = Depends(get_service)) -> StateResponse:
    return _state(service)


@router.put("/tool", response_model=StateResponse)
async def set_tool(
    request: ToolRequest, service: PlanService = Depends(get_service),
) -> StateResponse:
    service.set_tool(request.tool)
    return _state(service)


@router.patch("/settings", response_model=StateResponse)
async def update_settings(
    update: SettingsUpdate, service: PlanService = Depends(get_service),
) -> StateResponse:
    service.update_settings(update)
    return _state(service)


@router.post("/events", response_model=EventResponse)
async def pointer_event(
    event: PointerEvent, service: PlanService = Depends(get_service),
) -> EventResponse:
    """Apply one pointer event from the drawing surface."""
    transition = service.handle_event(event)
    return EventResponse(
        state=transition.state,
        effects=transition.effects,
        wall_count=len(service.store.list_walls()),
        opening_count=len(service.store.list_openings()),
    )


@router.get("/plan")
async def get_plan(service: PlanService = Depends(get_service)) -> dict[str, Any]:
    """Export the plan document."""
    return service.export_plan().to_dict()


@router.post("/plan", response_model=ImportResponse)
async def load_plan(
    document: Any = Body(...), service: PlanService = Depends(get_service),
) -> ImportResponse:
    """Import a (possibly partial) plan document."""
    try:
        settings = service.import_plan(document)
    except MalformedDocument as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ImportResponse(
        settings=settings,
        wall_count=len(service.store.list_walls()),
        opening_count=len(service.store.list_openings()),
    )


@router.delete("/plan", response_model=StateResponse)
async def clear_plan(service: PlanService = Depends(get_service)) -> StateResponse:
    service.clear()
    return _state(service)


@router.get("/plan.svg")
async def get_plan_svg(service: PlanService = Depends(get_service)) -> Response:
    return Response(content=service.export_svg(), media_type="image/svg+xml")


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
