from fastapi import Request

from string_analyzer.store import StringStore


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store
