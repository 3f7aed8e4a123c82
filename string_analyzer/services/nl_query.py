from types import MappingProxyType
from typing import List

from string_analyzer.errors import UnrecognizedPhraseError
from string_analyzer.services.filters import FilterSet

# Phrases are matched verbatim; no case folding or whitespace normalization.
PHRASE_FILTERS = MappingProxyType({
    "all single word palindromic strings": FilterSet(word_count=1, is_palindrome=True),
    "strings longer than 10 characters": FilterSet(min_length=11),
    "palindromic strings that contain the first vowel": FilterSet(
        is_palindrome=True, contains_character="a"
    ),
    "strings containing the letter z": FilterSet(contains_character="z"),
})


def supported_phrases() -> List[str]:
    return list(PHRASE_FILTERS)


def resolve(phrase: str) -> FilterSet:
    """
    Map a natural language query onto its filter set.
    Example: "strings longer than 10 characters" -> FilterSet(min_length=11)
    """
    try:
        return PHRASE_FILTERS[phrase]
    except (KeyError, TypeError):
        raise UnrecognizedPhraseError() from None
