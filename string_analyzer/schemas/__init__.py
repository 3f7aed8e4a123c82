from string_analyzer.schemas.strings import (
    ErrorResponse,
    HealthResponse,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringListResponse,
    StringProperties,
    StringResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "InterpretedQuery",
    "NaturalLanguageResponse",
    "StringListResponse",
    "StringProperties",
    "StringResponse",
]
