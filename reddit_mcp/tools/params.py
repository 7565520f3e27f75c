"""Parameter models for the Reddit tools."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

MAX_PAGE_COUNT = 10


class NavParams(BaseModel):
    random_string: str = Field(..., description="Dummy parameter for no-parameter tools")


class SearchParams(BaseModel):
    keywords: str = Field(..., min_length=1, strict=True, description="Keywords to search for on Reddit")
    pageCount: int = Field(
        ...,
        ge=1,
        le=MAX_PAGE_COUNT,
        strict=True,
        description=f"Number of result pages to scrape (1-{MAX_PAGE_COUNT})",
    )

    @field_validator("keywords")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("keywords must not be blank")
        return value


__all__ = ["MAX_PAGE_COUNT", "NavParams", "SearchParams"]
