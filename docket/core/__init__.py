"""
Core utilities shared across the Docket app.

This package hosts configuration helpers (env vars, storage paths, feature
flags) and cross-cutting pieces such as logging setup and CSRF protection.
Routers and services depend on these primitives instead of reading the
environment themselves.
"""
