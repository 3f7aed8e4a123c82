import hashlib
import re
from collections import Counter
from typing import Dict

from string_analyzer.models import StringProperties

_NON_ALNUM = re.compile(r"[^a-z0-9]")
# Same set as the JavaScript \s class (Unicode Zs, line terminators and BOM)
_WHITESPACE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string (UTF-8 bytes)"""
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome, ignoring case and anything outside [a-z0-9]"""
    cleaned = _NON_ALNUM.sub("", text.lower())
    return cleaned == cleaned[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by runs of whitespace"""
    return len([token for token in _WHITESPACE.split(text) if token])


def character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=character_frequency(value),
    )
