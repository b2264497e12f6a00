"""
Ward Bed Manager - hospital bed management backend.
"""

__version__ = "1.0.0"
