from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Request

from isometric.api.schemas.isometric import IsometricResponse
from isometric.api.schemas.isometric import LayoutResponse
from isometric.api.schemas.isometric import StatsResponse
from isometric.models import LayoutConfig
from isometric.models import RawCalendar
from isometric.services.isometric_service import SourceUnavailableError
from isometric.services.isometric_service import get_isometric_view
from isometric.settings import Settings


router = APIRouter()


def get_layout_config(request: Request) -> LayoutConfig:
    """Build layout configuration from the settings the app was created with."""

    app_settings: Settings = request.app.state.settings
    return app_settings.layout_config()


def _view_for(payload: RawCalendar, layout: LayoutConfig) -> dict[str, object]:
    try:
        return get_isometric_view(lambda: payload, layout)
    except SourceUnavailableError as exc:
        raise HTTPException(
            status_code=502, detail="Calendar source unavailable"
        ) from exc


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.post("/isometric", response_model=IsometricResponse)
def create_isometric_view(
    payload: RawCalendar, layout: LayoutConfig = Depends(get_layout_config)
) -> dict[str, object]:
    """Return statistics, overlay labels and render instructions for a calendar."""

    return _view_for(payload, layout)


@router.post("/isometric/stats", response_model=StatsResponse)
def create_isometric_stats(
    payload: RawCalendar, layout: LayoutConfig = Depends(get_layout_config)
) -> dict[str, object]:
    """Return only the statistics summary and overlay labels."""

    view = _view_for(payload, layout)
    return {
        "username": view["username"],
        "summary": view["summary"],
        "overlay": view["overlay"],
    }


@router.post("/isometric/layout", response_model=LayoutResponse)
def create_isometric_layout(
    payload: RawCalendar, layout: LayoutConfig = Depends(get_layout_config)
) -> dict[str, object]:
    """Return only the ordered render instructions."""

    view = _view_for(payload, layout)
    return {
        "username": view["username"],
        "canvas": view["canvas"],
        "instructions": view["instructions"],
    }
