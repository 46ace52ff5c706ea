"""Loading of renderers from entry points."""

from importlib.metadata import entry_points
from typing import Any

from allure_pdf.renderers.manifest import RendererManifest

ENTRY_POINT_GROUP = "allure_pdf.renderers"


class RendererNotFoundError(Exception):
    """Raised when a renderer is not found."""


def load_renderer_manifest(key: str) -> RendererManifest[Any]:
    """Load a renderer manifest by key.

    Args:
        key: The renderer key as registered in pyproject.toml
             (e.g., "pdf", "text")

    Returns:
        The renderer manifest instance

    Raises:
        RendererNotFoundError: If no renderer with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: RendererManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise RendererNotFoundError(
        f"Renderer '{key}' not found. Available renderers: {available}"
    )
