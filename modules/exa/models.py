"""Pydantic models for Exa API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExaResult(BaseModel):
    """A single page returned by search, contents, or findSimilar."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    url: str = ""
    title: str | None = None
    score: float | None = None
    published_date: str | None = Field(default=None, alias="publishedDate")
    author: str | None = None
    text: str | None = None
    highlights: list[str] | None = None
    highlight_scores: list[float] | None = Field(default=None, alias="highlightScores")
    summary: str | None = None


class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    results: list[ExaResult] = []
    autoprompt_string: str | None = Field(default=None, alias="autopromptString")
    request_id: str | None = Field(default=None, alias="requestId")


class ContentsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    results: list[ExaResult] = []
    request_id: str | None = Field(default=None, alias="requestId")


class FindSimilarResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    results: list[ExaResult] = []
    request_id: str | None = Field(default=None, alias="requestId")
