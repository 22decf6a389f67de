"""
FastAPI routers grouped by resource (vlans, monitoring).

Each module exposes an APIRouter that create_app() includes in the
application.
"""
