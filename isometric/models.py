from datetime import date
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class RawDay(BaseModel):
    """Structural record for one calendar cell as supplied by a source.

    `color` is kept as-is; the color decoder falls back to a default for
    anything it cannot read.
    """

    date: str | date
    week: int = Field(ge=0)
    color: Any = None
    tid: str | None = None


class RawTooltip(BaseModel):
    """Free-text count annotation linked to a calendar cell by `tid`."""

    tid: str
    text: Any = None


class RawCalendar(BaseModel):
    """Fully materialized source input for one run."""

    username: str | None = None
    days: list[RawDay] = Field(default_factory=list)
    tooltips: list[RawTooltip] = Field(default_factory=list)


class DayRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    week_index: int
    color: int
    count: int = Field(ge=0)


class WeekGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    week_index: int
    days: tuple[DayRecord, ...]


class Streak(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int = 0
    start_date: date | None = None
    end_date: date | None = None


class StatisticsSummary(BaseModel):
    """Derived statistics for a day sequence.

    `has_data` is False for an empty sequence. `best_day` is None both then
    and when no day has any activity. `average_per_day` is None when the
    sequence spans zero days.
    """

    model_config = ConfigDict(frozen=True)

    has_data: bool
    total_count: int = 0
    first_date: date | None = None
    last_date: date | None = None
    best_day: date | None = None
    best_count: int = 0
    current_week_total: int = 0
    current_week_start_date: date | None = None
    current_week_end_date: date | None = None
    average_per_day: float | None = None
    longest_streak: Streak = Streak()
    current_streak: Streak = Streak()


class Point3D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float = 0


class Point2D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class CubeDimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    x_axis: int
    y_axis: int
    z_axis: int


class RenderInstruction(BaseModel):
    """One resolved block: where to draw it, how big, and in which color."""

    model_config = ConfigDict(frozen=True)

    position: Point3D
    screen: Point2D
    dimension: CubeDimension
    color: int
    hex_color: str
    date: date
    count: int
    week: int
    day: int


class LayoutConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    cube_size: int = Field(default=16, gt=0)
    max_height: int = Field(default=100, ge=0)
    min_height: int = Field(default=3, ge=0)
    week_offset: int = Field(default=14, gt=0)
    day_offset: int = Field(default=13, gt=0)
    origin: Point2D = Point2D(x=130, y=90)
    canvas_width: int = Field(default=1000, gt=0)
    canvas_height: int = Field(default=600, gt=0)
    compact_spacing: bool = False
