from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

from app.filters import apply_filters
from app.schemas import StringResponse
from app.store import StringStore
from app.utils import analyze_string

logger = logging.getLogger(__name__)


class StringAlreadyExists(Exception):
    """Raised when creating a value that is already stored"""


def create_string(store: StringStore, value: str) -> StringResponse:
    """Analyze and store a new string"""
    properties = analyze_string(value)
    record = StringResponse(
        id=properties.sha256_hash,
        value=value,
        properties=properties,
        created_at=datetime.now(timezone.utc),
    )

    # check and insert under one lock so concurrent creates can't both succeed
    with store.lock:
        if store.has(value):
            raise StringAlreadyExists(value)
        store.put(record)

    logger.info(f"Stored string {record.id[:12]} (length={properties.length})")
    return record


def get_string_by_value(store: StringStore, value: str) -> Optional[StringResponse]:
    """Get string analysis by value"""
    return store.get(value)


def get_all_strings(store: StringStore, filters: Optional[Dict[str, Any]] = None) -> List[StringResponse]:
    """Get all strings matching the given filters"""
    return apply_filters(store.values(), filters or {})


def delete_string(store: StringStore, value: str) -> bool:
    """Delete string analysis by value"""
    deleted = store.delete(value)
    if deleted:
        logger.info(f"Deleted string of length {len(value)}")
    return deleted
