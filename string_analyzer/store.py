import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List

from string_analyzer.errors import DuplicateValueError, NotFoundError
from string_analyzer.models import AnalyzedString
from string_analyzer.services import filters as filter_engine
from string_analyzer.services.analyzer import analyze
from string_analyzer.services.filters import FilterSet

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with milliseconds, e.g. 2025-10-20T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class StringStore:
    """In-memory collection of analyzed strings keyed by their raw value.

    Sync route handlers run on a worker thread pool, so every operation takes
    the same lock. Insert checks for a duplicate and appends under a single
    acquisition.
    """

    def __init__(self):
        self._records: Dict[str, AnalyzedString] = {}
        self._lock = threading.Lock()

    def insert(self, value: str) -> AnalyzedString:
        """Analyze and store a new string"""
        with self._lock:
            if value in self._records:
                raise DuplicateValueError()

            properties = analyze(value)
            record = AnalyzedString(
                id=properties.sha256_hash,
                value=value,
                properties=properties,
                created_at=utc_timestamp(),
            )
            self._records[value] = record

        logger.info(f'"{value}" was newly added.')
        return record

    def get(self, value: str) -> AnalyzedString:
        """Get string analysis by value"""
        with self._lock:
            record = self._records.get(value)
        if record is None:
            raise NotFoundError()
        return record

    def delete(self, value: str) -> None:
        """Delete string analysis by value"""
        with self._lock:
            if self._records.pop(value, None) is None:
                raise NotFoundError()
        logger.info(f'"{value}" was deleted.')

    def list_all(self) -> List[AnalyzedString]:
        """All records in insertion order"""
        with self._lock:
            return list(self._records.values())

    def filter(self, filters: FilterSet) -> List[AnalyzedString]:
        """Get all strings matching the given filters"""
        return filter_engine.apply(self.list_all(), filters)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, value) -> bool:
        with self._lock:
            return value in self._records
