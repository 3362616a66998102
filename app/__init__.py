"""
ParamBinder Backend — Application Package Initializer
======================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    This backend follows a thin layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Dependencies (FastAPI Depends)    │  ← Request → RawParameters → binder
    ├─────────────────────────────────────┤
    │      Services (ParamBinder)         │  ← Pure resolution, no I/O
    ├─────────────────────────────────────┤
    │          Schemas (Data)             │  ← RawParameters, BindingSpec, HelloData
    └─────────────────────────────────────┘

    The binder never sees a Request object, so it can be tested without HTTP.
"""

__version__ = "1.0.0"
