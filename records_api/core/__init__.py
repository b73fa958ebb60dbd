"""
Core utilities shared across the records API.

This package hosts the configuration helpers (env vars, storage path, page
sizes) and the logging setup. Routers and scripts depend on these primitives
instead of reading the environment or configuring handlers themselves.
"""
