import logging
from collections.abc import Callable
from collections.abc import Iterable
from typing import Protocol

from isometric.models import CubeDimension
from isometric.models import LayoutConfig
from isometric.models import Point3D
from isometric.models import RawCalendar
from isometric.models import RenderInstruction
from isometric.services.aggregation import group_weeks
from isometric.services.aggregation import merge_days
from isometric.services.layout import build_render_instructions
from isometric.services.overlay import build_overlay
from isometric.services.statistics import summarize

logger = logging.getLogger(__name__)

CalendarSource = Callable[[], RawCalendar]


class SourceUnavailableError(Exception):
    """Raised when the calendar source cannot supply any input."""


class RenderTargetMissingError(Exception):
    """Raised when there is no drawable surface to render into."""


class IsometricRenderer(Protocol):
    def render_object(
        self, dimension: CubeDimension, color: int, position: Point3D
    ) -> None: ...


def load_calendar(source: CalendarSource) -> RawCalendar:
    """Materialize calendar input from a source before the core runs."""

    try:
        calendar = source()
    except Exception as exc:
        logger.warning("Calendar source failed: %s", exc)
        raise SourceUnavailableError("Calendar source unavailable") from exc

    if not isinstance(calendar, RawCalendar):
        raise SourceUnavailableError("Calendar source returned invalid data")
    return calendar


def draw_instructions(
    instructions: Iterable[RenderInstruction],
    renderer: IsometricRenderer | None,
) -> int:
    """Hand instructions to the renderer in order; returns how many were drawn."""

    if renderer is None:
        raise RenderTargetMissingError("Render target was not created")

    drawn = 0
    for instruction in instructions:
        renderer.render_object(
            instruction.dimension, instruction.color, instruction.position
        )
        drawn += 1
    return drawn


def build_isometric_view(
    calendar: RawCalendar, layout: LayoutConfig | None = None
) -> dict[str, object]:
    """Run the full pipeline over one materialized calendar."""

    layout = layout or LayoutConfig()
    days = merge_days(calendar.days, calendar.tooltips)
    weeks = group_weeks(days)
    summary = summarize(days, weeks)
    instructions = build_render_instructions(weeks, layout)

    logger.debug(
        "Built isometric view: %d days, %d weeks, %d instructions",
        len(days),
        len(weeks),
        len(instructions),
    )

    return {
        "username": calendar.username,
        "canvas": {"width": layout.canvas_width, "height": layout.canvas_height},
        "summary": summary,
        "overlay": build_overlay(summary),
        "weeks": weeks,
        "instructions": instructions,
    }


def get_isometric_view(
    source: CalendarSource, layout: LayoutConfig | None = None
) -> dict[str, object]:
    return build_isometric_view(load_calendar(source), layout)
