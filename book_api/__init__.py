"""
Top-level package for the Book API.

All functionality lives in submodules under ``app``; the ASGI
application is ``book_api.app.main:app``.
"""

__all__ = []
