"""API routers for DailyForms."""

from dailyforms.infrastructure.api.routes.collectors_router import router as collectors_router
from dailyforms.infrastructure.api.routes.entries_router import router as entries_router

__all__ = ["collectors_router", "entries_router"]
