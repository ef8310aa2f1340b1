"""Master API router mounted at /api/v1."""

from fastapi import APIRouter

from stagecraft.api.routes import health, issue_templates

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(issue_templates.router)
