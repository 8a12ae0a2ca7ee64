from fastapi import APIRouter
from river_flooding.api.v1.endpoints import simulate, impact, report

api_router = APIRouter()
api_router.include_router(simulate.router, prefix="", tags=["simulate"])
api_router.include_router(impact.router, prefix="", tags=["impact"])
api_router.include_router(report.router, prefix="", tags=["report"])
