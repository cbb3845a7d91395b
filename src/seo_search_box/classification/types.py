"""Data models for classification output."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

InputType = Literal["keyword", "url", "phone", "address", "business"]
Detector = Literal["url", "lat_lng", "phone", "address", "keyword_phrase", "business", "default"]

INPUT_TYPES: tuple[InputType, ...] = ("keyword", "url", "phone", "address", "business")


class InputMetadata(BaseModel):
    """Type-specific extras. Fields that do not apply to the type stay None."""

    model_config = ConfigDict(frozen=True)

    domain: str | None = None
    protocol: str | None = None
    path: str | None = None
    phone_formatted: str | None = None
    country_code: str | None = None
    is_lat_lng: bool | None = None


class ParsedInput(BaseModel):
    """Classification result for a single search box input."""

    model_config = ConfigDict(frozen=True)

    type: InputType
    value: str
    normalized: str
    confidence: float = Field(ge=0.0, le=1.0)
    metadata: InputMetadata = Field(default_factory=InputMetadata)
    detector: Detector = "default"
