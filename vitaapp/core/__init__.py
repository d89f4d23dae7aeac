"""
Core utilities shared across the VitaApp API.

This package hosts:
- configuration helpers (env vars, data paths)
- logging bootstrap
- small value helpers (record ids, ISO dates, numeric coercion)

Routers and services depend on these primitives instead of reading the
environment or formatting dates on their own.
"""
