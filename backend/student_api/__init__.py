"""Student CRUD API package.

The package exposes an in-memory student record store and the FastAPI
application serving it. Individual modules contain the concrete
implementations and documentation.
"""
