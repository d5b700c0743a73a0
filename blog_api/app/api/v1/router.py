"""
Top‑level router for version 1 of the API.

This router aggregates the endpoint routers under a unified router
that ``main.create_app`` includes in the application.
"""

from fastapi import APIRouter

from .endpoints import blogs, info

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
