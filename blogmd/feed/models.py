"""Pydantic models for parsed and normalized feed items."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RawItem(BaseModel):
    """One <item> element as it appears in the feed."""

    title: str = ""
    published_at: str = ""
    updated_at: str = ""
    body_markup: str = ""
    categories: list[str] = Field(default_factory=list)


class NormalizedItem(BaseModel):
    """A RawItem with canonical dates and a pre-formatted category block."""

    title: str = ""
    published_at: str = ""
    updated_at: str = ""
    body_markup: str = ""
    category_block: str = ""
