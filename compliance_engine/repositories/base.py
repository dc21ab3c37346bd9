"""
Base Repository - Compliance Scoring Engine
compliance_engine/repositories/base.py

In-memory record store. The engine never talks to a database: callers load
records from their own storage and hand them over through a repository with
this interface.
"""

from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository(Generic[ModelT]):
    """Keyed store of pydantic records."""

    def __init__(self, records: Optional[Iterable[ModelT]] = None):
        self._records: Dict[str, ModelT] = {}
        for record in records or []:
            self.add(record)

    def add(self, record: ModelT) -> ModelT:
        """Insert or replace a record by its id."""
        self._records[record.id] = record
        return record

    def get_by_id(self, record_id: str) -> Optional[ModelT]:
        """Return the record or None."""
        return self._records.get(record_id)

    def exists(self, record_id: str) -> bool:
        return record_id in self._records

    def get_all(self) -> List[ModelT]:
        """All records in insertion order."""
        return list(self._records.values())

    def remove(self, record_id: str) -> bool:
        """Delete a record; True if it existed."""
        return self._records.pop(record_id, None) is not None

    def __len__(self) -> int:
        return len(self._records)
