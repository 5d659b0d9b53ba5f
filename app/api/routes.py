from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response
from typing import Annotated, Optional
import logging

from app import crud
from app.query_parser import parse_natural_language_query
from app.schemas import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringFilterParams,
    StringListResponse,
    StringResponse,
)
from app.store import StringStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    try:
        return crud.create_string(store, string_data.value)
    except crud.StringAlreadyExists:
        logger.warning("Rejected duplicate string")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="String already exists in the system"
        )


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    params: Annotated[StringFilterParams, Query()],
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    """
    filters = params.to_filters()
    strings = crud.get_all_strings(store, filters)
    return StringListResponse(data=strings, count=len(strings), filters_applied=filters)


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing query parameter"
        )

    try:
        filters = parse_natural_language_query(query)
    except Exception as e:
        logger.error(f"Error parsing natural language query: {e}")
        filters = {}

    if not filters:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unable to parse natural language query"
        )

    strings = crud.get_all_strings(store, filters)
    return NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters)
    )


@router.get("/strings/{string_value:path}", response_model=StringResponse)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    record = crud.get_string_by_value(store, string_value)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="String does not exist in the system"
        )
    return record


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    if not crud.delete_string(store, string_value):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="String does not exist in the system"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
