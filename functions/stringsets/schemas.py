"""
Pydantic schemas for the string sets API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class StringSetListResponse(BaseModel):
    sets: dict[int, list[str]]


class StringSetResponse(BaseModel):
    id: int
    strings: list[str]


class CreatedResponse(BaseModel):
    id: int


class SearchResponse(BaseModel):
    ids: list[int]


class StringListResponse(BaseModel):
    strings: list[str]


class SetStatisticsResponse(BaseModel):
    count: int
    shortest_length: int
    longest_length: int
    average_length: float
    median_length: float


class LongestChainResponse(BaseModel):
    chain: list[str]
    switch_index: Optional[int] = None
