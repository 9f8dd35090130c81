"""
Camera management backend: root package.

This package contains the FastAPI app entry point (main.py), API routes and
the auth gate, use cases, domain models, and infrastructure (SQL and
in-memory stores, content-manager client).
"""
