"""Library catalog service.

A FastAPI application exposing CRUD operations over a catalog of books,
persisted through SQLModel into a relational store.
"""

__version__ = "1.0.0"
