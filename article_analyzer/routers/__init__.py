"""
API routers for v1 endpoints.
"""

from article_analyzer.routers.bias import router as bias_router

__all__ = [
    "bias_router",
]
