"""
FastAPI routers grouped by domain.

Each file inside this package exposes an APIRouter that is included in the
application built by records_api.app.create_app.
"""
