"""
Mutation reconciler for the client's record cache.

After the server confirms a create, update or delete, the matching
``apply_*`` function returns the new cache so that the derived view
reflects the change without fetching the full list again.  The input
list is never modified; on error it is simply left as it was.
"""

import logging
from typing import Any, Dict, List, Sequence

from company_directory.errors import DataConsistencyError, RecordNotFoundError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _index_of(records: Sequence[Record], record_id: Any) -> int:
    for index, record in enumerate(records):
        if record.get("id") == record_id:
            return index
    return -1


def apply_create(records: Sequence[Record], new_record: Record) -> List[Record]:
    """Prepend ``new_record``; newest records are shown first.

    Raises ``DataConsistencyError`` if a record with the same id is
    already cached.
    """
    if _index_of(records, new_record.get("id")) >= 0:
        raise DataConsistencyError(
            f"Created company {new_record.get('id')} is already present in the local list"
        )
    return [new_record, *records]


def apply_update(records: Sequence[Record], updated_record: Record) -> List[Record]:
    """Replace the cached record with the same id, keeping its position.

    Raises ``RecordNotFoundError`` if no such record is cached.  The
    record is not inserted in that case.
    """
    index = _index_of(records, updated_record.get("id"))
    if index < 0:
        raise RecordNotFoundError(f"Company {updated_record.get('id')} is not in the local list")
    result = list(records)
    result[index] = updated_record
    return result


def apply_delete(records: Sequence[Record], record_id: Any) -> List[Record]:
    """Drop the record with ``record_id``; a missing id is not an error."""
    result = [record for record in records if record.get("id") != record_id]
    if len(result) == len(records):
        logger.debug("Company %s was not in the local list", record_id)
    return result
