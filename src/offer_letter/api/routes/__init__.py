"""API routes."""

from offer_letter.api.routes.compensation import router as compensation_router
from offer_letter.api.routes.health import router as health_router
from offer_letter.api.routes.offer_letters import router as offer_letters_router

__all__ = ["compensation_router", "health_router", "offer_letters_router"]
