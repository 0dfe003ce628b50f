# src/blogcred/moderation/store.py

import copy
import logging
import uuid
from typing import Any, Dict, List, Optional, Protocol, Tuple

from blogcred.core.errors import PostNotFound

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class PostStore(Protocol):
    """
    Record store backing posts and comments.

    Mirrors the entity API of the hosted backend: records are plain dicts
    keyed by "_id", grouped in named collections ("posts", "comments").
    """

    def create(self, collection: str, record: Record) -> Record: ...

    def update(self, collection: str, record_id: str, changes: Record) -> Record:
        """Apply changes to a record; raises PostNotFound for an unknown id."""
        ...

    def get(self, collection: str, record_id: str) -> Optional[Record]: ...

    def list(
        self,
        collection: str,
        filter: Optional[Record] = None,
        sort: Optional[Tuple[str, bool]] = None,
        limit: Optional[int] = None,
    ) -> List[Record]: ...


class InMemoryPostStore:
    """Process-local PostStore for tests and single-process use."""

    def __init__(self):
        self._collections: Dict[str, Dict[str, Record]] = {}

    def create(self, collection: str, record: Record) -> Record:
        stored = copy.deepcopy(record)
        stored["_id"] = uuid.uuid4().hex
        self._collections.setdefault(collection, {})[stored["_id"]] = stored
        logger.debug(f"Created {collection}/{stored['_id']}")
        return copy.deepcopy(stored)

    def update(self, collection: str, record_id: str, changes: Record) -> Record:
        records = self._collections.get(collection, {})
        if record_id not in records:
            raise PostNotFound(record_id)
        records[record_id].update(copy.deepcopy(changes))
        return copy.deepcopy(records[record_id])

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        record = self._collections.get(collection, {}).get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def list(
        self,
        collection: str,
        filter: Optional[Record] = None,
        sort: Optional[Tuple[str, bool]] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """
        Query a collection.

        Args:
            collection: Collection name
            filter: Field equality constraints, all of which must hold
            sort: (field, descending) pair; records missing the field sort last
            limit: Maximum number of records returned

        Returns:
            Copies of the matching records.
        """
        records = [
            record
            for record in self._collections.get(collection, {}).values()
            if all(record.get(key) == value for key, value in (filter or {}).items())
        ]

        if sort is not None:
            field, descending = sort
            present = [r for r in records if r.get(field) is not None]
            missing = [r for r in records if r.get(field) is None]
            present.sort(key=lambda r: r[field], reverse=descending)
            records = present + missing

        if limit is not None:
            records = records[:limit]

        return [copy.deepcopy(record) for record in records]
