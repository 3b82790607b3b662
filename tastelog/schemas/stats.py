"""Schemas for dashboard statistics."""

from pydantic import BaseModel, ConfigDict, Field


class Summary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_count: int = Field(..., alias="totalCount")
    avg_rating: float = Field(..., alias="avgRating")
    month_count: int = Field(..., alias="monthCount")
    tag_count: int = Field(..., alias="tagCount")


class TagUsage(BaseModel):
    tag: str
    usage_count: int


class TagList(BaseModel):
    items: list[TagUsage]
