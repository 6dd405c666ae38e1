"""Pydantic schemas for API responses."""
from pydantic import BaseModel, Field, field_validator
from typing import Literal


class Bounds(BaseModel):
    """Shape bounding box in EMUs."""

    left: int
    top: int
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)


class ShapeSummary(BaseModel):
    """One shape of the inspected slide."""

    name: str = Field(..., description="Shape name as stored in the slide")
    kind: Literal["TextBox", "TargetShape", "TitlePlaceholder", "Other"] = Field(
        ...,
        description="Role the formatter assigns to the shape"
    )
    bounds: Bounds | None = Field(None, description="Own transform, if the shape has one")
    text: str | None = Field(None, description="Text content, if the shape has a text frame")

    @field_validator('text')
    @classmethod
    def normalize_line_breaks(cls, v: str | None) -> str | None:
        """Vertical tabs mark line breaks inside python-pptx text."""
        if v is None:
            return v
        return v.replace("\v", "\n")


class SlideSummary(BaseModel):
    """Shapes of the first slide, in document order."""

    shapes: list[ShapeSummary]


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(..., description="Error message")
    detail: str | None = Field(None, description="Detailed error info")
