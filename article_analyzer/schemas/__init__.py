"""
Pydantic schemas for API request/response validation.
"""

from article_analyzer.schemas.bias import (
    BiasAnalyzeRequest,
    BiasAnalyzeResponse,
    BiasMatchOut,
    FactiveGroupOut,
    IntensifierGroupOut,
    LexiconResponse,
)

__all__ = [
    "BiasAnalyzeRequest",
    "BiasAnalyzeResponse",
    "BiasMatchOut",
    "FactiveGroupOut",
    "IntensifierGroupOut",
    "LexiconResponse",
]
