"""
API route handlers for the Listing Store API.
"""

from .entities import router as entities_router
from .listings import router as listings_router

__all__ = ["entities_router", "listings_router"]
