"""
Top‑level package for the Ship Registry API.

All functionality lives in submodules under ``app``; import the
application as ``ship_registry_api.app.main:app``.
"""

__all__ = []
