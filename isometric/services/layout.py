import math
from collections.abc import Sequence

from isometric.models import CubeDimension
from isometric.models import LayoutConfig
from isometric.models import Point2D
from isometric.models import Point3D
from isometric.models import RenderInstruction
from isometric.models import WeekGroup
from isometric.services.parsing import color_to_hex


def project(point: Point3D, origin: Point2D) -> Point2D:
    """Project a 3D point onto the screen using 2:1 pixel isometry."""

    return Point2D(
        x=origin.x + (point.x - point.y),
        y=origin.y + math.floor((point.x + point.y) / 2) - point.z,
    )


def cube_height(count: int, max_count: int, config: LayoutConfig) -> int:
    """Scale a day's count to a block height, never below `min_height`."""

    if max_count <= 0:
        return config.min_height
    return config.min_height + int((config.max_height / max_count) * count)


def grid_position(
    week_position: int, day_position: int, config: LayoutConfig
) -> tuple[float, float]:
    if config.compact_spacing:
        # Week columns and day rows overlap slightly, as on the upstream calendar.
        grid_x = config.week_offset * (week_position + 1) / (config.week_offset + 1)
        grid_y = config.day_offset * day_position / config.week_offset
        return grid_x, grid_y
    return week_position, day_position


def build_render_instructions(
    weeks: Sequence[WeekGroup], config: LayoutConfig | None = None
) -> list[RenderInstruction]:
    """Lay out one block per day, in week-then-day order."""

    config = config or LayoutConfig()
    max_count = max(
        (day.count for week in weeks for day in week.days), default=0
    )

    instructions: list[RenderInstruction] = []
    for week_position, week in enumerate(weeks):
        for day_position, day in enumerate(week.days):
            grid_x, grid_y = grid_position(week_position, day_position, config)
            position = Point3D(
                x=config.cube_size * grid_x, y=config.cube_size * grid_y, z=0
            )
            instructions.append(
                RenderInstruction(
                    position=position,
                    screen=project(position, config.origin),
                    dimension=CubeDimension(
                        x_axis=config.cube_size,
                        y_axis=config.cube_size,
                        z_axis=cube_height(day.count, max_count, config),
                    ),
                    color=day.color,
                    hex_color=color_to_hex(day.color),
                    date=day.date,
                    count=day.count,
                    week=week.week_index,
                    day=day_position,
                )
            )

    return instructions
