"""
Services package: request-scoped operations over the database.
"""

from . import beds, patients, transfers, discharges, waitlist, dashboard

__all__ = ["beds", "patients", "transfers", "discharges", "waitlist", "dashboard"]
