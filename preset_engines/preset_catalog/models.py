"""Schemas for preset catalog records and queries."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from preset_engines.common.slug import slugify


class Sample(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    url: str = Field(..., description="Path relative to the public samples root")


class PresetPayload(BaseModel):
    """Body accepted by the authoring routes. Unknown fields are stored as-is."""

    model_config = ConfigDict(extra="allow")

    name: str
    type: Optional[str] = None
    factory: Optional[bool] = None
    samples: List[Sample] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _name_must_slugify(cls, value: str) -> str:
        if not slugify(value):
            raise ValueError("name must contain at least one letter or digit")
        return value

    def to_record(self) -> dict:
        return self.model_dump(exclude_none=True)


class PresetFilters(BaseModel):
    """List filters. Empty strings behave like absent filters."""

    q: Optional[str] = None
    type: Optional[str] = None
    factory: Optional[str] = None

    @property
    def factory_only(self) -> bool:
        return self.factory == "true"
