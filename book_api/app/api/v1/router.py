"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified
prefix.  When new resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
