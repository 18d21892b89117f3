"""
Notes API — Application Package Initializer
============================================

What: Marks the `notes_api` directory as a Python package.
Who:  Used by uvicorn (`notes_api.main:app`), the console entry points and pytest.

Architecture Note:
    The service is a thin layered FastAPI application:

    ┌─────────────────────────────────────┐
    │        Middleware (cross-cutting)   │  ← request id, logging, static assets
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Note Store)        │  ← in-memory collection, id scheme
    ├─────────────────────────────────────┤
    │          Schemas (Pydantic)         │  ← typed input and response shapes
    └─────────────────────────────────────┘

    Routes never touch the note list directly; they receive the store owned
    by the application instance through a FastAPI dependency.
"""

__version__ = "1.0.0"
