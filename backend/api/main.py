"""
InvDash API — FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import get_settings

settings = get_settings()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("InvDash API starting up", version=settings.app_version, env=settings.app_env)
    yield
    logger.info("InvDash API shutting down")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Retail inventory management dashboard",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import and register routers
from api.v1.routers import (
    dashboard,
    insights,
    inventory,
    orders,
    products,
    reports,
    suppliers,
)

app.include_router(dashboard.router)
app.include_router(products.router)
app.include_router(inventory.router)
app.include_router(orders.router)
app.include_router(suppliers.router)
app.include_router(reports.router)
app.include_router(insights.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for load balancers."""
    return {"status": "healthy", "version": settings.app_version}
