"""
Sports Community application root package.

This package contains the FastAPI app entry point (main.py), HTML and JSON
routes, domain models with field validation, and the MongoDB persistence
layer for users and their posts.
"""
