"""
Top-level package for the World Wonders API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``world_wonders_api.app.main:app``.
"""

__all__ = []
