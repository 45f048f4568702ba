"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests onto the application use cases.
"""

from .scaling_controller import router as scaling_router

__all__ = ["scaling_router"]
