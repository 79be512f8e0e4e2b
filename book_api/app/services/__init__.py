"""
Service layer abstraction.

``book_store`` talks to the database; ``book_service`` is the thin
façade the API handlers depend on, which keeps the handlers testable
with a substitute service.
"""
