"""Configuration for the plain-text renderer."""

from pydantic import BaseModel, Field


class TextRendererConfig(BaseModel):
    """Configuration for the plain-text renderer."""

    width: int = Field(default=100, ge=20, description="Line width for wrapping")
    indent: int = Field(default=2, ge=0, description="Spaces per list level")
