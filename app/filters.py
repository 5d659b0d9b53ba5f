from typing import Any, Dict, Iterable, List

from app.schemas import StringResponse


def matches_filters(record: StringResponse, filters: Dict[str, Any]) -> bool:
    """Check a single record against every present filter (logical AND)"""
    props = record.properties

    if filters.get("is_palindrome") is not None:
        if props.is_palindrome != filters["is_palindrome"]:
            return False

    if filters.get("min_length") is not None:
        if props.length < filters["min_length"]:
            return False

    if filters.get("max_length") is not None:
        if props.length > filters["max_length"]:
            return False

    if filters.get("word_count") is not None:
        if props.word_count != filters["word_count"]:
            return False

    if filters.get("contains_character") is not None:
        # Case-insensitive check against the value itself
        if filters["contains_character"].lower() not in record.value.lower():
            return False

    return True


def apply_filters(records: Iterable[StringResponse], filters: Dict[str, Any]) -> List[StringResponse]:
    """Return the records matching all filters, keeping their original order"""
    return [record for record in records if matches_filters(record, filters)]
