"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from planner.models import EditorSettings, StoreEffect, ToolMode, ViewState


class ToolRequest(BaseModel):
    """Request body for PUT /tool."""
    tool: ToolMode


class StateResponse(BaseModel):
    """Current view state and settings."""
    state: ViewState
    settings: EditorSettings


class EventResponse(BaseModel):
    """Response from POST /events."""
    state: ViewState
    effects: list[StoreEffect]
    wall_count: int
    opening_count: int


class ImportResponse(BaseModel):
    settings: EditorSettings
    wall_count: int
    opening_count: int
