"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from grow_your_tree.api.models import (
    FoodLogRequest,
    JournalRequest,
    LoginRequest,
    StepsRequest,
    WaterRequest,
)
from grow_your_tree.api.ui import router as ui_router
from grow_your_tree.app_logging import configure_logging
from grow_your_tree.containers import AppContainer
from grow_your_tree.domain.checklist import ChecklistItem
from grow_your_tree.domain.errors import (
    InvalidPhotoError,
    InvalidQuantityError,
    TrackerError,
    UnknownFoodError,
)
from grow_your_tree.domain.nutrition import food_options
from grow_your_tree.services.tracker import DayTransition

_ERROR_STATUS: dict[type[TrackerError], int] = {
    UnknownFoodError: 422,
    InvalidQuantityError: 422,
    InvalidPhotoError: 422,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Grow Your Tree")
    app.state.container = container

    app.include_router(ui_router)

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(
        request: Request, exc: TrackerError
    ) -> JSONResponse:
        """Return domain errors as JSON bodies."""
        logger.info("Rejected request %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=_status_for(exc),
            content={"error": exc.code, "detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/state")
    async def get_state(request: Request) -> dict[str, object]:
        """Return the current dashboard."""
        return _dashboard(request)

    @app.get("/api/foods")
    async def list_foods(request: Request) -> dict[str, object]:
        """Return the foods available for logging."""
        state_container = _container(request)
        table = state_container.tracker_service.nutrition_table
        return {"foods": food_options(table)}

    @app.post("/api/session/login")
    async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
        """Start a local session under a display name."""
        _container(request).tracker_service.login(payload.name)
        return _dashboard(request)

    @app.post("/api/session/logout")
    async def logout(request: Request) -> dict[str, object]:
        """End the local session; today's data is kept."""
        _container(request).tracker_service.logout()
        return _dashboard(request)

    @app.post("/api/day/next")
    async def next_day(request: Request) -> dict[str, object]:
        """Close the current day and start the next one."""
        transition = _container(request).tracker_service.next_day()
        return {**_dashboard(request), "transition": _transition_summary(transition)}

    @app.post("/api/day/reset")
    async def reset_day(request: Request) -> dict[str, object]:
        """Clear today's entries without advancing the day."""
        _container(request).tracker_service.reset_daily()
        return _dashboard(request)

    @app.post("/api/water")
    async def add_water(payload: WaterRequest, request: Request) -> dict[str, object]:
        """Add or subtract water."""
        _container(request).tracker_service.add_water(payload.delta_ml)
        return _dashboard(request)

    @app.put("/api/steps")
    async def set_steps(payload: StepsRequest, request: Request) -> dict[str, object]:
        """Set today's step count."""
        _container(request).tracker_service.set_steps(payload.steps)
        return _dashboard(request)

    @app.post("/api/checklist/{item}/toggle")
    async def toggle_check(item: ChecklistItem, request: Request) -> dict[str, object]:
        """Flip one checklist item."""
        _container(request).tracker_service.toggle_check(item)
        return _dashboard(request)

    @app.post("/api/foods/log", status_code=status.HTTP_201_CREATED)
    async def add_food(payload: FoodLogRequest, request: Request) -> dict[str, object]:
        """Log a food portion."""
        entry = _container(request).tracker_service.add_food(
            payload.food_key, payload.grams
        )
        return {**_dashboard(request), "entry_id": str(entry.id)}

    @app.delete("/api/foods/log/{entry_id}")
    async def remove_food(entry_id: UUID, request: Request) -> dict[str, object]:
        """Remove a logged food."""
        _container(request).tracker_service.remove_food(entry_id)
        return _dashboard(request)

    @app.put("/api/journal")
    async def set_journal(
        payload: JournalRequest, request: Request
    ) -> dict[str, object]:
        """Replace today's journal text."""
        _container(request).tracker_service.set_journal(payload.text)
        return _dashboard(request)

    @app.put("/api/photo")
    async def upload_photo(request: Request) -> dict[str, object]:
        """Attach the request body as today's photo."""
        photo_service = _container(request).photo_service
        photo_service.check_declared_size(request.headers.get("content-length"))
        body = bytearray()
        async for chunk in request.stream():
            body.extend(chunk)
            photo_service.check_size(len(body))
        await photo_service.attach(bytes(body), request.headers.get("content-type"))
        return _dashboard(request)

    @app.delete("/api/photo")
    async def clear_photo(request: Request) -> dict[str, object]:
        """Remove today's photo."""
        _container(request).photo_service.clear()
        return _dashboard(request)

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _dashboard(request: Request) -> dict[str, object]:
    return {"dashboard": _container(request).dashboard_service.current()}


def _status_for(exc: TrackerError) -> int:
    if isinstance(exc, InvalidPhotoError) and exc.too_large:
        return 413
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return 400


def _transition_summary(transition: DayTransition) -> dict[str, object]:
    """Describe a day transition for the page."""
    plant = transition.plant
    if transition.grew:
        message = (
            f"Day complete! Streak {plant.streak}, "
            f"your plant is now a {plant.current.name}."
        )
    else:
        message = "Some goals were missed, so your plant went back to a Seed."
    return {
        "grew": transition.grew,
        "goals": transition.goals,
        "previous_stage": transition.previous.stage,
        "stage": plant.stage,
        "streak": plant.streak,
        "day_index": plant.day_index,
        "message": message,
    }
