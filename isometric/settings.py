from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from isometric.models import LayoutConfig
from isometric.models import Point2D


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    Layout defaults use the `ISO_` prefix, e.g. `ISO_CUBE_SIZE`.
    """

    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1
    rate_limit_per_minute: int = 30
    rate_limit_window_seconds: int = 60
    log_level: str = "INFO"

    iso_cube_size: int = 16
    iso_max_height: int = 100
    iso_min_height: int = 3
    iso_week_offset: int = 14
    iso_day_offset: int = 13
    iso_origin_x: int = 130
    iso_origin_y: int = 90
    iso_canvas_width: int = 1000
    iso_canvas_height: int = 600
    iso_compact_spacing: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def layout_config(self) -> LayoutConfig:
        return LayoutConfig(
            cube_size=self.iso_cube_size,
            max_height=self.iso_max_height,
            min_height=self.iso_min_height,
            week_offset=self.iso_week_offset,
            day_offset=self.iso_day_offset,
            origin=Point2D(x=self.iso_origin_x, y=self.iso_origin_y),
            canvas_width=self.iso_canvas_width,
            canvas_height=self.iso_canvas_height,
            compact_spacing=self.iso_compact_spacing,
        )
