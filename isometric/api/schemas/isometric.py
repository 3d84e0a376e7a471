from typing import Any

from pydantic import BaseModel

from isometric.models import RenderInstruction
from isometric.models import StatisticsSummary
from isometric.models import WeekGroup


class CanvasSize(BaseModel):
    width: int
    height: int


class Overlay(BaseModel):
    """Display labels plus the raw summary values they were built from."""

    labels: dict[str, str]
    values: dict[str, Any]


class StatsResponse(BaseModel):
    """Statistics summary and overlay labels for a calendar."""

    username: str | None
    summary: StatisticsSummary
    overlay: Overlay


class LayoutResponse(BaseModel):
    """Ordered render instructions for a calendar."""

    username: str | None
    canvas: CanvasSize
    instructions: list[RenderInstruction]


class IsometricResponse(BaseModel):
    """Full isometric view: statistics, overlay, weeks and render instructions."""

    username: str | None
    canvas: CanvasSize
    summary: StatisticsSummary
    overlay: Overlay
    weeks: list[WeekGroup]
    instructions: list[RenderInstruction]
