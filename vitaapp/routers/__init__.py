"""
FastAPI routers grouped by resource (collections, profile, dashboard).

Each module exposes an APIRouter (or a builder for one) that the app factory
mounts under /api. Routers only translate HTTP to service calls and service
errors to the ``{"error": message}`` envelope.
"""
