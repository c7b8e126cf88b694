"""
HTTP routes for the string sets API.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Body, Depends, HTTPException

from longest_chain import ChainSearchTimeout, solve_chain
from stringsets.config import Settings, get_settings
from stringsets.dependencies import get_store
from stringsets.schemas import (
    CreatedResponse,
    LongestChainResponse,
    SearchResponse,
    SetStatisticsResponse,
    StringListResponse,
    StringSetListResponse,
    StringSetResponse,
)
from stringsets.store import StringSetStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sets", response_model=StringSetListResponse)
def list_sets(store: StringSetStore = Depends(get_store)):
    sets = {set_id: list(strings) for set_id, strings in store.all_current_sets()}
    return StringSetListResponse(sets=sets)


@router.post("/sets", response_model=CreatedResponse, status_code=201)
def upload_set(
    strings: list[str] = Body(...),
    store: StringSetStore = Depends(get_store),
):
    """
    Store a new string set. Order is kept; duplicates and empty strings are rejected.
    """
    try:
        set_id = store.create(strings)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return CreatedResponse(id=set_id)


@router.get("/sets/{set_id}", response_model=StringSetResponse)
def get_set(set_id: int, store: StringSetStore = Depends(get_store)):
    record = store.get(set_id)
    if not record:
        raise HTTPException(status_code=404, detail="String set not found")
    return StringSetResponse(**record.as_dict())


@router.delete("/sets/{set_id}", response_model=StringSetResponse)
def delete_set(set_id: int, store: StringSetStore = Depends(get_store)):
    record = store.delete(set_id)
    if not record:
        raise HTTPException(status_code=404, detail="String set not found")
    return StringSetResponse(**record.as_dict())


@router.get("/sets/{set_id}/statistics", response_model=SetStatisticsResponse)
def set_statistics(set_id: int, store: StringSetStore = Depends(get_store)):
    stats = store.statistics(set_id)
    if not stats:
        raise HTTPException(status_code=404, detail="String set not found")
    return SetStatisticsResponse(**asdict(stats))


@router.post(
    "/sets/{first_id}/intersection/{second_id}",
    response_model=CreatedResponse,
    status_code=201,
)
def create_intersection(
    first_id: int, second_id: int, store: StringSetStore = Depends(get_store)
):
    """
    Store the strings of `first_id` that are also in `second_id`, in `first_id` order.
    """
    try:
        set_id = store.create_intersection(first_id, second_id)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return CreatedResponse(id=set_id)


@router.post("/search", response_model=SearchResponse)
def search(query: str = Body(...), store: StringSetStore = Depends(get_store)):
    return SearchResponse(ids=store.search(query))


@router.get("/most_common", response_model=StringListResponse)
def most_common(store: StringSetStore = Depends(get_store)):
    return StringListResponse(strings=store.most_common())


@router.get("/longest", response_model=StringListResponse)
def longest(store: StringSetStore = Depends(get_store)):
    return StringListResponse(strings=store.longest())


@router.post("/exactly_in", response_model=StringListResponse)
def exactly_in(count: int = Body(...), store: StringSetStore = Depends(get_store)):
    return StringListResponse(strings=store.exactly_in(count))


@router.get("/longest_chain", response_model=LongestChainResponse)
def longest_chain(
    store: StringSetStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Longest chain over all stored sets, with at most one switch between two sets.
    """
    snapshot = store.all_current_sets()
    try:
        chain = solve_chain(
            [strings for _, strings in snapshot],
            timeout=settings.longest_chain_timeout_seconds,
        )
    except ChainSearchTimeout as exc:
        logger.warning("Longest chain over %d sets gave up: %s", len(snapshot), exc)
        raise HTTPException(status_code=503, detail=str(exc))
    return LongestChainResponse(chain=chain.as_list(), switch_index=chain.switch_index)
