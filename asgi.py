"""
ASGI entry point for running the verification endpoints standalone.

Run with:
    uvicorn asgi:app --reload
"""

from app import create_app

app = create_app()
