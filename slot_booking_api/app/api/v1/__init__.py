"""
Version 1 of the API.

This subpackage bundles all endpoints of the booking API.  Breaking
changes should be introduced in new version subpackages (e.g. ``v2``).
"""
