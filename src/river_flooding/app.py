"""FastAPI application entry point for the River Flooding Digital Twin service.

The service is a thin HTTP surface over the in-process hydrological core; it
keeps no state between requests. Every request carries the discharge and
rainfall it should be evaluated against.
"""

from fastapi import FastAPI
from river_flooding.api.v1.routes import api_router
from river_flooding.config import settings
import argparse
import logging
import uvicorn


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns
    -------
    FastAPI
        Application with the v1 router mounted at ``/api/v1``.
    """
    app = FastAPI(title=settings.APP_NAME)
    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="River Flooding Digital Twin Service")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8008)
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(app, host=args.host, port=args.port)
