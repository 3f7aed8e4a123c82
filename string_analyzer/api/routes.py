from fastapi import APIRouter, Body, Depends, Query, Response, status
from typing import Any, List, Optional
import logging

from string_analyzer.api.dependencies import get_store
from string_analyzer.api.query_params import build_filter_set, extract_value
from string_analyzer.errors import UnrecognizedPhraseError
from string_analyzer.schemas import (
    ErrorResponse,
    HealthResponse,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringListResponse,
    StringResponse,
)
from string_analyzer.services import nl_query
from string_analyzer.store import StringStore

router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
    }
)
logger = logging.getLogger(__name__)


@router.get("/", response_model=List[StringResponse])
def list_everything(store: StringStore = Depends(get_store)):
    """Ping endpoint; returns every stored string."""
    return [StringResponse.from_record(record) for record in store.list_all()]


@router.get("/health", response_model=HealthResponse)
def health_check(store: StringStore = Depends(get_store)):
    """Health check endpoint"""
    return HealthResponse(status="healthy", count=len(store))


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(
    payload: Any = Body(None),
    store: StringStore = Depends(get_store),
):
    """
    Analyze and store a string.
    Returns 400 for a missing value, 422 for a non-string value, 409 if it already exists.
    """
    value = extract_value(payload)
    record = store.insert(value)
    return StringResponse.from_record(record)


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using one of the supported natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise UnrecognizedPhraseError()

    filters = nl_query.resolve(query)
    strings = store.filter(filters)
    data = [StringResponse.from_record(s) for s in strings]

    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters.as_dict()),
    )


@router.get("/strings/{string_value:path}", response_model=StringResponse)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return StringResponse.from_record(store.get(string_value))


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="true or false"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character to look for"),
    store: StringStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    filters = build_filter_set(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    strings = store.filter(filters)
    data = [StringResponse.from_record(s) for s in strings]

    return StringListResponse(
        data=data,
        count=len(data),
        filters_applied=filters.as_dict(),
    )


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    store.delete(string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
