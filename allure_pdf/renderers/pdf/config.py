"""Configuration for the PDF renderer."""

from typing import Literal

from pydantic import BaseModel, Field, FilePath


class PdfRendererConfig(BaseModel):
    """Configuration for the PDF renderer.

    Fonts default to the built-in Helvetica family. When ``font_path`` or
    ``bold_font_path`` is set, the TrueType file is registered under
    ``font_name`` / ``bold_font_name`` so non-Latin text can be rendered.
    """

    page_size: Literal["A3", "A4", "A5", "LETTER", "LEGAL"] = "A4"
    margin: float = Field(default=36.0, gt=0, description="Page margin in points")
    font_name: str = "Helvetica"
    bold_font_name: str = "Helvetica-Bold"
    font_path: FilePath | None = None
    bold_font_path: FilePath | None = None
    title_font_size: float = Field(default=26.0, gt=0)
    heading_font_size: float = Field(default=20.0, gt=0)
    subheading_font_size: float = Field(default=14.0, gt=0)
    body_font_size: float = Field(default=10.0, gt=0)
