"""PDF renderer manifest."""

from allure_pdf.renderers.manifest import RendererManifest
from allure_pdf.renderers.pdf.config import PdfRendererConfig
from allure_pdf.renderers.pdf.renderer import PdfRenderer

pdf_manifest = RendererManifest(
    config_cls=PdfRendererConfig,
    renderer_factory=PdfRenderer.from_config,
)
