"""
Static data shipped with the application.
"""

from .sample_listings import get_sample_listings

__all__ = ["get_sample_listings"]
