from pydantic import BaseModel
from typing import Any, Dict, List

from string_analyzer.models import AnalyzedString


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: str

    @classmethod
    def from_record(cls, record: AnalyzedString) -> "StringResponse":
        props = record.properties
        return cls(
            id=record.id,
            value=record.value,
            properties=StringProperties(
                length=props.length,
                is_palindrome=props.is_palindrome,
                unique_characters=props.unique_characters,
                word_count=props.word_count,
                sha256_hash=props.sha256_hash,
                character_frequency_map=dict(props.character_frequency_map),
            ),
            created_at=record.created_at,
        )


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery


class ErrorResponse(BaseModel):
    status: str = "error"
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
    count: int
