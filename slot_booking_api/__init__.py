"""
Top‑level package for the Slot Booking API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
