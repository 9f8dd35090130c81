"""
API layer for the camera management backend.

Exposes HTTP endpoints under /api (auth, users, cameras, uploads) behind the
auth gate middleware.
"""
