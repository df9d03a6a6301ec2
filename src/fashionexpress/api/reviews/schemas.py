"""Pydantic request/response schemas for the Reviews API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SubmitReviewRequest(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"examples": [{"rating": 5, "comment": "Fits perfectly, lovely fabric."}]},
    )

    rating: int = Field(..., ge=1, le=5)
    comment: str | None = Field(None, max_length=2000)


class ReviewResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    rating: int
    comment: str | None = None
    created_at: datetime
    user_name: str | None = None


class StatusResponse(BaseModel):
    status: str = "ok"
