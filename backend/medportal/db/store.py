import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from medportal.config.constants import EntityKind
from medportal.db.base import Base
from medportal.db.models import MODELS

logger = logging.getLogger(__name__)

# Server-assigned fields that callers can never set or change
PROTECTED_FIELDS = ("id", "created_at")


class EntityStore:
    """
    In-memory keyed collections, one per entity kind.

    Every operation is synchronous and completes before returning, so a single
    event loop never observes a half-applied insert or update. Contents live
    for the lifetime of the instance; nothing is persisted.
    """

    def __init__(self) -> None:
        self._collections: Dict[EntityKind, Dict[int, Base]] = {
            kind: {} for kind in EntityKind
        }
        self._next_ids: Dict[EntityKind, int] = {kind: 1 for kind in EntityKind}

    def insert(self, kind: EntityKind, fields: Dict[str, Any]) -> Base:
        """
        Assign id and createdAt, store the record and return it.

        The id counter only advances once the record has been built, so a
        rejected insert leaves the store untouched.
        """
        data = {k: v for k, v in fields.items() if k not in PROTECTED_FIELDS}
        record = MODELS[kind](
            id=self._next_ids[kind],
            created_at=datetime.now(timezone.utc),
            **data,
        )
        self._next_ids[kind] = record.id + 1
        self._collections[kind][record.id] = record
        logger.debug(f"Store: inserted {kind.value} id={record.id}")
        return record

    def get(self, kind: EntityKind, record_id: int) -> Optional[Base]:
        return self._collections[kind].get(record_id)

    def all(self, kind: EntityKind) -> List[Base]:
        """Snapshot of every record of a kind, in insertion order."""
        return list(self._collections[kind].values())

    def filter(self, kind: EntityKind, predicate: Callable[[Base], bool]) -> List[Base]:
        return [record for record in self._collections[kind].values() if predicate(record)]

    def update(
        self, kind: EntityKind, record_id: int, fields: Dict[str, Any]
    ) -> Optional[Base]:
        """
        Merge fields into an existing record.

        Returns None when the id is unknown. The fields are not validated here;
        id and created_at are always preserved.
        """
        current = self._collections[kind].get(record_id)
        if current is None:
            return None

        changes = {k: v for k, v in fields.items() if k not in PROTECTED_FIELDS}
        updated = current.model_copy(update=changes)
        self._collections[kind][record_id] = updated
        logger.debug(
            f"Store: updated {kind.value} id={record_id} fields={sorted(changes)}"
        )
        return updated

    def count(self, kind: EntityKind) -> int:
        return len(self._collections[kind])
