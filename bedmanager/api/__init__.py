"""
API package for the bed management backend.
"""

from .main import app

__all__ = ["app"]
