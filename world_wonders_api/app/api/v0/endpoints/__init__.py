"""
Endpoint subpackage for API v0.

Each module defines an ``APIRouter`` aggregated in ``router.py``.
"""
