"""Plain-text renderer manifest."""

from allure_pdf.renderers.manifest import RendererManifest
from allure_pdf.renderers.text.config import TextRendererConfig
from allure_pdf.renderers.text.renderer import TextRenderer

text_manifest = RendererManifest(
    config_cls=TextRendererConfig,
    renderer_factory=TextRenderer.from_config,
)
