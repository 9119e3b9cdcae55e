"""
Bookshelf Backend: Application Package Initializer
====================================================

What: Marks the `bookshelf` directory as a Python package.
Who:  Imported by uvicorn (`bookshelf.main:app`), pytest, and the `bookshelf`
      console script.

Architecture Note:
    The backend follows the same thin layering for every endpoint:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← id parsing, stock rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Book record + Pydantic
    ├─────────────────────────────────────┤
    │        Store (In-Memory)            │  ← Seeded shared collection
    └─────────────────────────────────────┘

    Routes never touch the collection directly; they call BookService,
    which raises application exceptions that main.py maps to status codes.
"""

__version__ = "1.0.0"
