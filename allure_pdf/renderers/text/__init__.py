"""Plain-text renderer module."""

from allure_pdf.renderers.text.config import TextRendererConfig
from allure_pdf.renderers.text.manifest import text_manifest
from allure_pdf.renderers.text.renderer import TextRenderer

__all__ = ["TextRenderer", "TextRendererConfig", "text_manifest"]
