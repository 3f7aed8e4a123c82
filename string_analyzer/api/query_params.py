import re
from typing import Any, Optional

from string_analyzer.errors import InvalidFilterParamError, MissingFieldError, WrongTypeError
from string_analyzer.services.filters import FilterSet

_NON_NEGATIVE_INT = re.compile(r"\+?[0-9]+")


def parse_bool(name: str, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise InvalidFilterParamError(f"{name} must be 'true' or 'false'")


def parse_non_negative_int(name: str, raw: str) -> int:
    if not _NON_NEGATIVE_INT.fullmatch(raw):
        raise InvalidFilterParamError(f"{name} must be a non-negative integer")
    try:
        return int(raw)
    except ValueError:
        # More digits than the interpreter will convert
        raise InvalidFilterParamError(f"{name} is too large") from None


def parse_single_character(name: str, raw: str) -> str:
    if len(raw) != 1:
        raise InvalidFilterParamError(f"{name} must be a single character")
    return raw


def build_filter_set(
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None,
) -> FilterSet:
    """
    Validate raw query parameters and build the filter set.
    Any malformed parameter rejects the whole request.
    """
    return FilterSet(
        is_palindrome=None if is_palindrome is None else parse_bool("is_palindrome", is_palindrome),
        min_length=None if min_length is None else parse_non_negative_int("min_length", min_length),
        max_length=None if max_length is None else parse_non_negative_int("max_length", max_length),
        word_count=None if word_count is None else parse_non_negative_int("word_count", word_count),
        contains_character=(
            None
            if contains_character is None
            else parse_single_character("contains_character", contains_character)
        ),
    )


def extract_value(payload: Any) -> str:
    """Pull the "value" field out of a POST /strings body"""
    if not isinstance(payload, dict):
        raise MissingFieldError()

    value = payload.get("value")
    # Falsy values (null, "", 0, false, [] ...) count as missing
    if not value:
        raise MissingFieldError()
    if not isinstance(value, str):
        raise WrongTypeError()
    return value
