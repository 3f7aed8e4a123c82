from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class StringProperties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view so the snapshot cannot be edited after creation
        object.__setattr__(
            self,
            "character_frequency_map",
            MappingProxyType(dict(self.character_frequency_map)),
        )


@dataclass(frozen=True)
class AnalyzedString:
    id: str  # SHA-256 hash
    value: str
    properties: StringProperties
    created_at: str  # ISO-8601, UTC
