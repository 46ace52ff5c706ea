"""PDF renderer module."""

from allure_pdf.renderers.pdf.config import PdfRendererConfig
from allure_pdf.renderers.pdf.manifest import pdf_manifest
from allure_pdf.renderers.pdf.renderer import PdfRenderer

__all__ = ["PdfRenderer", "PdfRendererConfig", "pdf_manifest"]
