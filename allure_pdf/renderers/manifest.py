"""Renderer manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

from allure_pdf.renderers.base import ReportRenderer


@dataclass(frozen=True, kw_only=True)
class RendererManifest[ConfigT: BaseModel]:
    """Manifest describing a renderer plugin.

    The manifest contains references to the configuration class and the
    renderer factory. The factory opens the output file and yields a renderer
    writing to it; the file is closed when the context exits.
    """

    config_cls: type[ConfigT]
    renderer_factory: Callable[
        [ConfigT, Path], AbstractContextManager[ReportRenderer]
    ]
