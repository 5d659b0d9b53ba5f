from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer, field_validator
from typing import Any, Dict, Optional, List
from datetime import datetime, timezone


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2025-10-18T12:00:00.123Z"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class StringCreate(BaseModel):
    value: StrictStr = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, created_at: datetime) -> str:
        return format_timestamp(created_at)


class StringFilterParams(BaseModel):
    """Query parameters accepted by GET /strings"""
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    word_count: Optional[int] = Field(None, ge=0)
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    @field_validator("is_palindrome", mode="before")
    @classmethod
    def validate_is_palindrome(cls, v: Any):
        """Only the literals 'true' and 'false' are accepted"""
        if v is None or isinstance(v, bool):
            return v
        if v == "true":
            return True
        if v == "false":
            return False
        raise ValueError("is_palindrome must be 'true' or 'false'")

    @field_validator("min_length", "max_length", "word_count", mode="before")
    @classmethod
    def validate_integer(cls, v: Any):
        """Only plain digit strings are accepted, so '1.0' or '5abc' are rejected"""
        if v is None or (isinstance(v, int) and not isinstance(v, bool)):
            return v
        if isinstance(v, str) and v.isascii() and v.isdigit():
            return int(v)
        raise ValueError("must be a non-negative integer")

    def to_filters(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery
