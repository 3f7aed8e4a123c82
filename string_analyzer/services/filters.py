from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from string_analyzer.models import AnalyzedString


@dataclass(frozen=True)
class FilterSet:
    """Conjunction of optional predicates; an unset field does not filter"""

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """Only the filters that were actually supplied"""
        return {key: value for key, value in asdict(self).items() if value is not None}


def matches(record: AnalyzedString, filters: FilterSet) -> bool:
    """Check a single record against every supplied predicate"""
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if filters.contains_character is not None:
        if not props.character_frequency_map.get(filters.contains_character, 0):
            return False

    return True


def apply(records: Iterable[AnalyzedString], filters: FilterSet) -> List[AnalyzedString]:
    """Return the records matching all filters, in their original order"""
    return [record for record in records if matches(record, filters)]
