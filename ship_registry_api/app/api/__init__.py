"""
API package containing versioned routes.

Each version subpackage (``v1``, ...) exposes a top‑level ``router``
that includes its domain endpoints.  Dependencies shared by all
versions live in ``deps``.
"""
