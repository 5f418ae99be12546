"""
Middleware package for the Listing Store API.
"""

from .timing import RequestTimingMiddleware

__all__ = ["RequestTimingMiddleware"]
