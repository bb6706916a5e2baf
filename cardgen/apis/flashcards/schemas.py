from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject: str = Field(default="", description="Subject such as Biology or Math")
    topic: str = Field(default="", description="Topic within the subject")
    card_count: int | float | str | None = Field(
        default=5, alias="cardCount", description="Cards to generate (1-15)"
    )


class SuggestionsResponse(BaseModel):
    suggestions: list[str]
    subject: str


class ValidateTopicsRequest(BaseModel):
    topics: list[str]


class TopicValidationRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic: str
    is_valid: bool = Field(alias="isValid")
    reason: str | None = None
    suggestion: str | None = None


class ValidateTopicsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    validation_results: list[TopicValidationRead] = Field(alias="validationResults")
    overall_valid: bool = Field(alias="overallValid")


class ApiStatusResponse(BaseModel):
    configured: bool
    message: str
